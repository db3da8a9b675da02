"""Rules for creating and changing parent and marriage links."""

import logging

from errors import (
    InvalidGenderError,
    SameGenderMarriageError,
    SelfReferenceError,
)
from models import Gender, MaritalStatus, Person

logger = logging.getLogger(__name__)

PARENT_GENDER = {"mother": Gender.FEMALE, "father": Gender.MALE}


def check_parent(manager, person_id: int, parent_id: int, role: str) -> Person:
    """
    Validate `parent_id` as the mother or father of `person_id`.

    Returns:
        The parent record.

    Raises:
        SelfReferenceError: If both ids are the same.
        PersonNotFoundError: If the parent is not registered.
        InvalidGenderError: If the parent's gender does not fit the role.
    """
    if person_id == parent_id:
        logger.warning(f"Rejected {role} link: {person_id} cannot be own {role}")
        raise SelfReferenceError(person_id, role)
    parent = manager.get(parent_id, entity=role.capitalize())
    expected = PARENT_GENDER[role]
    if parent.gender is not expected:
        logger.warning(f"Rejected {role} link: {parent_id} is not {expected.name.lower()}")
        raise InvalidGenderError(parent_id, expected, role)
    return parent


def _relink(manager, person: Person, old_parent_id: int | None, new_parent_id: int):
    if old_parent_id == new_parent_id:
        return
    if old_parent_id is not None:
        manager.tree_index.detach_child(old_parent_id, person.id)
    manager.tree_index.attach_child(new_parent_id, manager.tree_index.node(person.id))


def set_mother(manager, person_id: int, mother_id: int) -> None:
    check_parent(manager, person_id, mother_id, "mother")
    person = manager.get(person_id)
    _relink(manager, person, person.mother_id, mother_id)
    person.mother_id = mother_id
    logger.info(f"Set mother of {person_id} to {mother_id}")


def set_father(manager, person_id: int, father_id: int) -> None:
    check_parent(manager, person_id, father_id, "father")
    person = manager.get(person_id)
    _relink(manager, person, person.father_id, father_id)
    person.father_id = father_id
    logger.info(f"Set father of {person_id} to {father_id}")


def set_parent(manager, person_id: int, mother_id: int, father_id: int) -> None:
    """
    Set both parents of a person at once.

    Both links are validated (father first) before either is written, so a failure
    leaves the person exactly as it was.
    """
    check_parent(manager, person_id, father_id, "father")
    check_parent(manager, person_id, mother_id, "mother")
    manager.get(person_id)
    set_father(manager, person_id, father_id)
    set_mother(manager, person_id, mother_id)


def update_marital_status(manager, person_id: int, status: MaritalStatus) -> None:
    """Overwrite a person's marital status without checking the referenced partner."""
    person = manager.get(person_id)
    person.marital_status = status
    logger.info(f"Marital status of {person_id} is now {status}")


def marry(manager, id_a: int, id_b: int, allow_same_gender: bool = False) -> None:
    """
    Marry two registered persons to each other.

    Both persons are checked before either status changes; on success each one's
    status is Married referencing the other.

    Raises:
        SelfReferenceError: If both ids are the same.
        PersonNotFoundError: If either person is not registered.
        SameGenderMarriageError: If both share a gender and `allow_same_gender` is off.
    """
    if id_a == id_b:
        logger.warning(f"Rejected marriage: {id_a} cannot marry themselves")
        raise SelfReferenceError(id_a, "spouse")
    person_a = manager.get(id_a)
    person_b = manager.get(id_b)
    if person_a.gender is person_b.gender and not allow_same_gender:
        logger.warning(f"Rejected marriage of {id_a} and {id_b}: same gender")
        raise SameGenderMarriageError(id_a, id_b)

    for person, spouse in ((person_a, person_b), (person_b, person_a)):
        previous = person.marital_status
        if previous.partner_id not in (None, spouse.id):
            logger.info(f"{person.id} leaves status {previous} to marry {spouse.id}")

    person_a.marital_status = MaritalStatus.married(id_b)
    person_b.marital_status = MaritalStatus.married(id_a)
    logger.info(f"Married {id_a} and {id_b}")

