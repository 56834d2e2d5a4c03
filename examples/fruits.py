"""Pick one fruit; press 'o' to search for the highlighted one."""

import webbrowser

from picklist import ItemCallback, SelectionCanceled, SelectionError, SingleSelect
from picklist import items_from_labels


def main():
    items = items_from_labels(["apple", "banana", "berry"])
    select = SingleSelect(items)
    select.bind(
        "o", ItemCallback(lambda value: webbrowser.open(f"https://pypi.org/search/?q={value}"))
    )
    try:
        print(select.run())
    except SelectionCanceled:
        print("Canceled")
    except SelectionError as e:
        print(f"Unexpected error: {e}")


if __name__ == "__main__":
    main()
