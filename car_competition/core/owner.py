"""Owner record for the car competition registry."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Owner:
    """Person who owned a car during a given ownership year.

    Attributes:
        name: Full name of the owner.
        tax_id: Tax identification number (cc).  Identity key when
            comparing owners within a year; compared case-insensitively.
        address: Street address.
        city: City of residence.
        phone: Contact phone number.
    """

    name: str
    tax_id: str
    address: str
    city: str
    phone: str

    def __post_init__(self) -> None:
        """Validate owner fields."""
        for field_name in ("name", "tax_id", "address", "city", "phone"):
            if not getattr(self, field_name):
                raise ValueError(f"{field_name} must not be empty.")

    def matches(self, tax_id: str) -> bool:
        """Return True if *tax_id* identifies this owner (case-insensitive)."""
        return self.tax_id.casefold() == tax_id.casefold()

    def describe(self) -> str:
        """Single-line full detail of the owner."""
        return (
            f"Name: {self.name}, Tax ID: {self.tax_id}, "
            f"Address: {self.address}, City: {self.city}, Phone: {self.phone}"
        )

    def basic_info(self) -> str:
        """Single-line abbreviated detail of the owner."""
        return f"{self.name} (Tax ID: {self.tax_id})"
