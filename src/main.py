"""
1) Register a demonstration family in memory.
2) Link parents, marriages and divorces through the relationship rules.
3) Validate the registry for parent cycles and unreciprocated statuses.
4) Build the rooted family tree and print it.
5) Export the registry as Graphviz (dot, png, pdf, svg, jpg) and JSON.
"""

import logging
from pathlib import Path

import export
from errors import ExportError
from models import Address, Gender, MaritalStatus, Person
from parsing import read_addresses
from plotting import describe_tree
from registry import PersonManager
from relationships import marry, set_parent, update_marital_status
from validation import validate_registry

LOG_FORMAT = "[%(filename)s::%(lineno)d::%(asctime)s::%(levelname)s::%(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_file: Path | str = "application.log", level: int = logging.INFO):
    """Send all log records to `log_file`, replacing its previous content."""
    logging.basicConfig(
        filename=str(log_file),
        filemode="w",
        level=level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        force=True,
    )


DEFAULT_ADDRESSES = [
    Address("123 Main St", "New York", "NY", "USA", "10001"),
    Address("456 Elm St", "New York", "NY", "USA", "10002"),
    Address("789 Oak St", "New York", "NY", "USA", "10003"),
]


def build_demo_family(addresses: list[Address] | None = None) -> PersonManager:
    """Three generations: two couples, a divorce, and their children."""
    main_st, elm_st, oak_st = (list(addresses or []) + DEFAULT_ADDRESSES)[:3]

    manager = PersonManager()

    john = manager.register(Person.create("John", "Doe", "1990-01-01", Gender.MALE, main_st))
    jane = manager.register(Person.create("Jane", "Doe", "1992-03-05", Gender.FEMALE, main_st))
    marry(manager, john.id, jane.id)

    david = manager.register(
        Person.create(
            "David", "Doe", "1995-07-10", Gender.MALE, main_st,
            mother_id=jane.id, father_id=john.id,
        )
    )
    emily = manager.register(Person.create("Emily", "Smith", "1998-09-15", Gender.FEMALE, elm_st))
    update_marital_status(manager, david.id, MaritalStatus.divorced(emily.id))
    update_marital_status(manager, emily.id, MaritalStatus.divorced(david.id))

    for first_name, birthday, gender, address in [
        ("Michael", "2000-12-20", Gender.MALE, elm_st),
        ("Sarah", "1997-04-25", Gender.FEMALE, oak_st),
        ("Olivia", "2003-06-30", Gender.FEMALE, elm_st),
    ]:
        child = manager.register(Person.create(first_name, "Smith", birthday, gender, address))
        set_parent(manager, child.id, emily.id, david.id)

    william = manager.register(Person.create("William", "Smith", "2005-09-10", Gender.MALE, elm_st))
    set_parent(manager, william.id, jane.id, john.id)

    return manager


def main():
    # Paths
    project_root = Path(__file__).parent.parent
    address_path = project_root / "addresses.csv"
    output_dir = project_root / "output"

    setup_logging(project_root / "application.log")

    addresses = None
    if address_path.exists():
        print(f"Reading addresses: {address_path}")
        addresses = read_addresses(address_path)
        print(f"  Found {len(addresses)} addresses")

    print("Registering family...")
    manager = build_demo_family(addresses)
    print(f"  Registry has {len(manager)} persons")

    print("Validating registry...")
    warnings = validate_registry(manager)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:  # Show first 10 warnings
            print(f"    - {w}")
        if len(warnings) > 10:
            print(f"    ... and {len(warnings) - 10} more")
    else:
        print("  No validation issues found")

    print("Family tree:")
    print(describe_tree(manager))

    print(f"Exporting to: {output_dir}")
    for writer in (export.to_graphviz, export.to_json, export.to_png, export.to_pdf,
                   export.to_svg, export.to_jpg):
        try:
            path = writer(manager, output_dir=output_dir)
            print(f"  Saved {path}")
        except ExportError as e:
            print(f"  {writer.__name__} failed: {e}")

    print("Done!")


if __name__ == "__main__":
    main()
