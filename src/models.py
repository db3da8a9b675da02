"""Data classes for family tree entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

from identity import generate_id


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"


class MaritalState(str, Enum):
    SINGLE = "Single"
    MARRIED = "Married"
    DIVORCED = "Divorced"
    WIDOWED = "Widowed"


@dataclass(frozen=True)
class MaritalStatus:
    """
    Marital status of a person.

    Single carries no partner id; Married, Divorced and Widowed carry exactly one
    (the spouse or former spouse).
    """

    state: MaritalState = MaritalState.SINGLE
    partner_id: int | None = None

    def __post_init__(self):
        if self.state is MaritalState.SINGLE and self.partner_id is not None:
            raise ValueError("Single status cannot reference a partner")
        if self.state is not MaritalState.SINGLE and self.partner_id is None:
            raise ValueError(f"{self.state.value} status requires a partner id")

    @classmethod
    def single(cls) -> "MaritalStatus":
        return cls()

    @classmethod
    def married(cls, partner_id: int) -> "MaritalStatus":
        return cls(MaritalState.MARRIED, partner_id)

    @classmethod
    def divorced(cls, partner_id: int) -> "MaritalStatus":
        return cls(MaritalState.DIVORCED, partner_id)

    @classmethod
    def widowed(cls, partner_id: int) -> "MaritalStatus":
        return cls(MaritalState.WIDOWED, partner_id)

    def __str__(self) -> str:
        if self.partner_id is None:
            return self.state.value
        return f"{self.state.value}({self.partner_id})"


@dataclass(frozen=True)
class Address:
    street: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    postal_code: str = ""


@dataclass(frozen=True)
class PersonInfo:
    id: int
    first_name: str
    last_name: str
    birthday: str  # ISO format YYYY-MM-DD
    gender: Gender


@dataclass
class Person:
    info: PersonInfo
    address: Address = field(default_factory=Address)
    marital_status: MaritalStatus = field(default_factory=MaritalStatus)
    mother_id: int | None = None
    father_id: int | None = None

    @classmethod
    def create(
        cls,
        first_name: str,
        last_name: str,
        birthday: str,
        gender: Gender,
        address: Address | None = None,
        marital_status: MaritalStatus | None = None,
        mother_id: int | None = None,
        father_id: int | None = None,
    ) -> "Person":
        """Build a person whose id is derived from name and birthday."""
        info = PersonInfo(
            id=generate_id(first_name, last_name, birthday),
            first_name=first_name,
            last_name=last_name,
            birthday=birthday,
            gender=gender,
        )
        return cls(
            info=info,
            address=address or Address(),
            marital_status=marital_status or MaritalStatus.single(),
            mother_id=mother_id,
            father_id=father_id,
        )

    @property
    def id(self) -> int:
        return self.info.id

    @property
    def first_name(self) -> str:
        return self.info.first_name

    @property
    def last_name(self) -> str:
        return self.info.last_name

    @property
    def birthday(self) -> str:
        return self.info.birthday

    @property
    def gender(self) -> Gender:
        return self.info.gender

    def has_parent(self) -> bool:
        return self.mother_id is not None or self.father_id is not None

    def __str__(self) -> str:
        return f"ID: {self.id}|{{{self.last_name}|{self.first_name}|{self.birthday} }}"


V = TypeVar("V")


@dataclass(eq=False)
class TreeNode(Generic[V]):
    """A value with an ordered list of child nodes, unique by key."""

    key: int
    value: V
    children: list["TreeNode[V]"] = field(default_factory=list)

    def add_child(self, node: "TreeNode[V]") -> bool:
        if any(child.key == node.key for child in self.children):
            return False
        self.children.append(node)
        return True

    def remove_child(self, key: int) -> bool:
        for i, child in enumerate(self.children):
            if child.key == key:
                del self.children[i]
                return True
        return False

    def child_keys(self) -> list[int]:
        return [child.key for child in self.children]
