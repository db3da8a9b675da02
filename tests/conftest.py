import pytest

from models import Gender, Person
from registry import PersonManager
from relationships import marry


@pytest.fixture
def manager():
    return PersonManager()


@pytest.fixture
def make_person(manager):
    """Create and register a person; extra keyword arguments go to Person.create."""
    def _make(first_name, gender, last_name="Doe", birthday="1990-01-01", **kwargs):
        return manager.register(Person.create(first_name, last_name, birthday, gender, **kwargs))
    return _make


@pytest.fixture
def couple(manager, make_person):
    """A married couple without parents: (wife, husband)."""
    wife = make_person("Jane", Gender.FEMALE, birthday="1992-03-05")
    husband = make_person("John", Gender.MALE)
    marry(manager, wife.id, husband.id)
    return wife, husband
