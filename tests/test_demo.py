import pytest

from recordstore.demo import describe_lookup, main

EXPECTED = """\
Items:
ID: 1, Item Name: Friend, Item Price: 1
ID: 2, Item Name: Liver, Item Price: 70000
ID: 3, Item Name: Buy, Item Price: 99999999

Clients:
ID: 1, Client Name: Johnson, Client Address: Maple Street
ID: 2, Client Name: Smith, Client Address: Elm Street
ID: 3, Client Name: Williams, Client Address: Oak Street

Item with ID 2: Liver

Client with ID 3: Williams
-------------------------------------
Copied Dot: (1, 2)
Copied Quadrilateral: Upper Left - (1, 2), Lower Right - (3, 4)
-------------------------------------
Comparison of Complex Numbers: 1
Comparison of Ratios: 1
"""


def test_main_prints_expected_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert capsys.readouterr().out == EXPECTED


def test_describe_lookup_not_found() -> None:
    assert describe_lookup("Item", 99, None) == "Item with ID 99 not found."
    assert describe_lookup("Client", 3, "Williams") == "Client with ID 3: Williams"
