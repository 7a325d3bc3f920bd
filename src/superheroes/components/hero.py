from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Hero:
    """One catalog entry: resource keys for the name, description and image."""
    name: str
    description: str
    image: str
