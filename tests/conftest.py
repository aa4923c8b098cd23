import pytest


@pytest.fixture
def chicago_corpus():
    """chicago x4, is x8, cold x6 over twelve lines."""
    return [
        "chicago is",
        "chicago is",
        "is cold",
        "is cold",
        "is cold",
        "is cold",
        "chicago",
        "chicago",
        "is",
        "is",
        "cold",
        "cold",
    ]


@pytest.fixture
def species_corpus():
    """carp=10, perch=3, whitefish=2, trout=1, salmon=1, eel=1."""
    return (
        ["carp"] * 10
        + ["perch"] * 3
        + ["whitefish"] * 2
        + ["trout", "salmon", "eel"]
    )
