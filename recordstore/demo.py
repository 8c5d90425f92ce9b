"""Demo driver: fills the two stores, looks records up, clones and compares."""
import logging
from typing import Optional, Sequence

from recordstore.cloning import Dot, Quadrilateral, clone_object
from recordstore.comparison import ComplexNumber, ModulusComparer, Ratio, RatioComparer
from recordstore.core import CatalogEntry, ClientEntry, ClientRegistry, ItemStore

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 37


def _format_dot(dot: Dot) -> str:
    return f"({dot.x}, {dot.y})"


def build_item_store() -> ItemStore:
    items = ItemStore()
    items.insert(CatalogEntry(1, "Friend", 1))
    items.insert(CatalogEntry(2, "Liver", 70000))
    items.insert(CatalogEntry(3, "Buy", 99999999))
    return items


def build_client_registry() -> ClientRegistry:
    clients = ClientRegistry()
    clients.insert(ClientEntry(1, "Johnson", "Maple Street"))
    clients.insert(ClientEntry(2, "Smith", "Elm Street"))
    clients.insert(ClientEntry(3, "Williams", "Oak Street"))
    return clients


def describe_lookup(kind: str, identifier: int, name: Optional[str]) -> str:
    if name is None:
        return f"{kind} with ID {identifier} not found."
    return f"{kind} with ID {identifier}: {name}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demo and print its results. Arguments are accepted but unused."""
    logging.basicConfig(level=logging.WARNING)

    items = build_item_store()
    clients = build_client_registry()

    print("Items:")
    for item in items.all():
        print(
            f"ID: {item.identifier}, Item Name: {item.name}, "
            f"Item Price: {item.price}"
        )

    print("\nClients:")
    for client in clients.all():
        print(
            f"ID: {client.identifier}, Client Name: {client.name}, "
            f"Client Address: {client.address}"
        )

    item_id = 2
    found_item = items.find_by_id(item_id)
    print()
    print(describe_lookup("Item", item_id, found_item.name if found_item else None))

    client_id = 3
    found_client = clients.find_by_id(client_id)
    print()
    print(
        describe_lookup(
            "Client", client_id, found_client.name if found_client else None
        )
    )

    print(SEPARATOR)

    dot = clone_object(Dot(1, 2))
    quad = clone_object(Quadrilateral(Dot(1, 2), Dot(3, 4)))
    print(f"Copied Dot: {_format_dot(dot)}")
    print(
        f"Copied Quadrilateral: Upper Left - {_format_dot(quad.upper_left)}, "
        f"Lower Right - {_format_dot(quad.lower_right)}"
    )

    print(SEPARATOR)

    complex_result = ModulusComparer().assess(
        ComplexNumber(3, 4), ComplexNumber(1, 2)
    )
    ratio_result = RatioComparer().assess(Ratio(3, 5), Ratio(1, 3))
    print(f"Comparison of Complex Numbers: {complex_result}")
    print(f"Comparison of Ratios: {ratio_result}")

    logger.debug("Demo finished")
    return 0
