from models import Gender, MaritalStatus, Person
from relationships import marry, set_mother
from tree import ANCESTOR_NAME, build_family_tree, get_root_parents, walk


def test_build_family_tree_empty(manager):
    assert build_family_tree(manager) is None


def test_build_family_tree_single_root(manager, make_person):
    p = make_person("John", Gender.MALE)
    root = build_family_tree(manager)
    assert root is manager.tree_index.node(p.id)
    assert root.value is p


def test_build_family_tree_single_line(manager, make_person):
    mom = make_person("Jane", Gender.FEMALE)
    kid = make_person("David", Gender.MALE, birthday="2015-07-10", mother_id=mom.id)
    root = build_family_tree(manager)
    assert root.value is mom
    assert root.child_keys() == [kid.id]


def test_build_family_tree_disjoint_roots(manager, make_person):
    a = make_person("John", Gender.MALE)
    b = make_person("Emily", Gender.FEMALE, last_name="Smith")
    root = build_family_tree(manager)
    assert root.value.first_name == ANCESTOR_NAME
    assert root.key == max(a.id, b.id) + 1
    assert root.value.marital_status == MaritalStatus.single()
    assert not root.value.has_parent()
    assert root.children == [manager.tree_index.node(a.id), manager.tree_index.node(b.id)]
    assert root.key not in manager


def test_married_roots_get_synthetic_wrapper(manager, make_person):
    a = make_person("Alice", Gender.FEMALE)
    b = make_person("Bob", Gender.MALE)
    marry(manager, a.id, b.id)
    c = manager.register(
        Person.create("Carol", "Doe", "2015-01-01", Gender.FEMALE, mother_id=a.id, father_id=b.id)
    )

    root = build_family_tree(manager)
    assert root.value.first_name == ANCESTOR_NAME
    assert root.child_keys() == [a.id, b.id]
    for parent_node in root.children:
        assert parent_node.child_keys() == [c.id]


def test_build_family_tree_all_in_cycle(manager, make_person):
    a = make_person("Ann", Gender.FEMALE)
    b = make_person("Bea", Gender.FEMALE)
    set_mother(manager, a.id, b.id)
    set_mother(manager, b.id, a.id)
    assert build_family_tree(manager) is None


def test_get_root_parents_of_root(manager, make_person):
    p = make_person("John", Gender.MALE)
    visited = set()
    assert get_root_parents(manager, p, visited) == [p]
    assert visited == {p.id}


def test_get_root_parents_common_grandparent(manager, make_person):
    grandpa = make_person("George", Gender.MALE, birthday="1930-01-01")
    mom = make_person("Mary", Gender.FEMALE, birthday="1960-01-01", father_id=grandpa.id)
    dad = make_person("Frank", Gender.MALE, birthday="1958-01-01", father_id=grandpa.id)
    kid = make_person("Kim", Gender.FEMALE, birthday="1990-01-01", mother_id=mom.id, father_id=dad.id)

    assert get_root_parents(manager, kid) == [grandpa]


def test_get_root_parents_order_mother_first(manager, make_person):
    gran = make_person("Greta", Gender.FEMALE, birthday="1930-01-01")
    gramps = make_person("Gus", Gender.MALE, birthday="1929-01-01")
    mom = make_person(
        "Mary", Gender.FEMALE, birthday="1960-01-01", mother_id=gran.id, father_id=gramps.id
    )
    dad = make_person("Frank", Gender.MALE, birthday="1958-01-01")
    kid = make_person("Kim", Gender.FEMALE, birthday="1990-01-01", mother_id=mom.id, father_id=dad.id)

    assert get_root_parents(manager, kid) == [gran, gramps, dad]


def test_get_root_parents_cycle_terminates(manager, make_person):
    a = make_person("Ann", Gender.FEMALE)
    b = make_person("Bea", Gender.FEMALE)
    set_mother(manager, a.id, b.id)
    set_mother(manager, b.id, a.id)
    visited = set()
    assert get_root_parents(manager, a, visited) == []
    assert visited == {a.id, b.id}


def test_walk_depths(manager, couple):
    wife, husband = couple
    kid = manager.register(
        Person.create("David", "Doe", "2015-07-10", Gender.MALE, mother_id=wife.id, father_id=husband.id)
    )
    root = build_family_tree(manager)
    assert [(depth, node.key) for depth, node in walk(root)] == [
        (0, root.key),
        (1, wife.id),
        (2, kid.id),
        (1, husband.id),
        (2, kid.id),
    ]


def test_walk_cycle_terminates(manager, make_person):
    a = make_person("Ann", Gender.FEMALE)
    b = make_person("Bea", Gender.FEMALE)
    set_mother(manager, a.id, b.id)
    set_mother(manager, b.id, a.id)
    keys = [node.key for _, node in walk(manager.tree_index.node(a.id))]
    assert keys == [a.id, b.id]
