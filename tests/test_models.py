import pytest

from identity import generate_id
from models import Address, Gender, MaritalState, MaritalStatus, Person, TreeNode


def test_person_create_defaults():
    p = Person.create("John", "Doe", "1990-01-01", Gender.MALE)
    assert p.id == generate_id("John", "Doe", "1990-01-01")
    assert p.first_name == "John"
    assert p.last_name == "Doe"
    assert p.birthday == "1990-01-01"
    assert p.gender is Gender.MALE
    assert p.address == Address()
    assert p.marital_status == MaritalStatus.single()
    assert p.mother_id is None and p.father_id is None
    assert not p.has_parent()


def test_person_identity_is_frozen():
    p = Person.create("John", "Doe", "1990-01-01", Gender.MALE)
    with pytest.raises(AttributeError):
        p.info.first_name = "Jack"


@pytest.mark.parametrize("mother_id,father_id", [(1, None), (None, 2), (1, 2)])
def test_person_has_parent(mother_id, father_id):
    p = Person.create("John", "Doe", "1990-01-01", Gender.MALE, mother_id=mother_id, father_id=father_id)
    assert p.has_parent()


def test_person_str():
    p = Person.create("John", "Doe", "1990-01-01", Gender.MALE)
    assert str(p) == f"ID: {p.id}|{{Doe|John|1990-01-01 }}"


def test_marital_status_constructors():
    assert MaritalStatus.married(5) == MaritalStatus(MaritalState.MARRIED, 5)
    assert MaritalStatus.divorced(5).state is MaritalState.DIVORCED
    assert MaritalStatus.widowed(5).partner_id == 5
    assert str(MaritalStatus.married(5)) == "Married(5)"
    assert str(MaritalStatus.single()) == "Single"


def test_marital_status_partner_rules():
    with pytest.raises(ValueError):
        MaritalStatus(MaritalState.SINGLE, 3)
    with pytest.raises(ValueError):
        MaritalStatus(MaritalState.MARRIED)


def test_tree_node_add_child_dedups_by_key():
    root = TreeNode(key=1, value="root")
    assert root.add_child(TreeNode(key=2, value="a"))
    assert not root.add_child(TreeNode(key=2, value="changed"))
    assert root.child_keys() == [2]
    assert root.children[0].value == "a"


def test_tree_node_remove_child():
    root = TreeNode(key=1, value="root")
    root.add_child(TreeNode(key=2, value="a"))
    root.add_child(TreeNode(key=3, value="b"))
    assert root.remove_child(2)
    assert not root.remove_child(2)
    assert root.child_keys() == [3]
