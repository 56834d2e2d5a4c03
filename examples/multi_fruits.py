"""Pick several fruits; press 'o' to search for every selected one."""

import webbrowser

from picklist import MultiSelect, SelectionCallback, SelectionCanceled, SelectionError
from picklist import items_from_labels


def open_all(values):
    for value in values:
        webbrowser.open(f"https://pypi.org/search/?q={value}")


def main():
    items = items_from_labels(["apple", "banana", "berry"])
    select = MultiSelect(items)
    select.bind("o", SelectionCallback(open_all))
    try:
        print(", ".join(select.run()))
    except SelectionCanceled:
        print("Canceled")
    except SelectionError as e:
        print(f"Unexpected error: {e}")


if __name__ == "__main__":
    main()
