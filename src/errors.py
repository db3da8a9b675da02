"""Exceptions raised by the registry, relationship rules and exporters."""


class FamilyTreeError(Exception):
    pass


class PersonNotFoundError(FamilyTreeError, LookupError):
    def __init__(self, person_id: int, entity: str = "Person"):
        self.person_id = person_id
        self.entity = entity
        super().__init__(f"{entity} with ID {person_id} not found")


class DuplicatePersonError(FamilyTreeError, ValueError):
    def __init__(self, person_id: int):
        self.person_id = person_id
        super().__init__(f"Person with ID {person_id} already exists")


class SelfReferenceError(FamilyTreeError, ValueError):
    def __init__(self, person_id: int, role: str):
        self.person_id = person_id
        self.role = role
        super().__init__(f"Person with ID {person_id} cannot be their own {role}")


class InvalidGenderError(FamilyTreeError, ValueError):
    def __init__(self, person_id: int, expected, role: str):
        self.person_id = person_id
        self.expected = expected
        self.role = role
        super().__init__(
            f"Person with ID {person_id} cannot be a {role}: expected gender {expected.value}"
        )


class SameGenderMarriageError(FamilyTreeError, ValueError):
    def __init__(self, id_a: int, id_b: int):
        self.person_ids = (id_a, id_b)
        super().__init__(f"Persons {id_a} and {id_b} have the same gender")


class AddressFormatError(FamilyTreeError, ValueError):
    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {message}")


class ExportError(FamilyTreeError):
    pass


class UnsupportedExtensionError(ExportError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Extension '{extension}' is not yet supported")


class MissingExtensionError(ExportError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"File '{path}' must have an extension")


class GraphvizError(ExportError):
    def __init__(self, stderr: str):
        self.stderr = stderr
        super().__init__(f"Graphviz failed with error: {stderr}")
