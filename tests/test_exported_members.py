import xhttp


def test_all_imports_are_exported() -> None:
    included_private_members = [
        "__description__", "__title__", "__version__",
    ]
    excluded_from_all = {"cli"}
    assert xhttp.__all__ == sorted(
        (
            member
            for member in vars(xhttp).keys()
            if (
                not member.startswith("_")
                or member in included_private_members
            )
            and member not in excluded_from_all
        ),
        key=str.casefold,
    )
