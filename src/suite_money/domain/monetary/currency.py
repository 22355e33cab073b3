class Currency:
    """Identifies the currency of a `Money` amount.

    Only the code takes part in equality. All currencies are treated as having
    two decimal places.

    Attributes:
        code (str): Currency code (e.g., "USD", "EUR").
        name (str): Optional human-readable name.
    """

    __slots__ = ("_code", "_name")

    def __init__(self, code: str, name: str = ""):
        """Initialize a Currency instance.

        Args:
            code (str): Currency code (e.g., "USD").
            name (str): Optional full currency name.

        Raises:
            ValueError: If $code is empty or not a string.
        """
        if not isinstance(code, str) or not code.strip():
            raise ValueError(f"$code must be a non-empty string, but provided value is: '{code}'")

        self._code = code.upper().strip()
        self._name = name.strip() if isinstance(name, str) else ""

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self._code

    @property
    def name(self) -> str:
        """Get the currency name."""
        return self._name

    def equals(self, other: "Currency") -> bool:
        return self == other

    def __eq__(self, other) -> bool:
        """Check equality with another Currency."""
        if not isinstance(other, Currency):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        """Hash based on currency code."""
        return hash(self.code)

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}('{self.code}')"
