"""
Example 02: Output Shapes

This example demonstrates mapping entities onto Output shapes, post-mapping
modifiers and EntityToId rewriting.
"""

import json
from dataclasses import dataclass, field
from typing import Annotated, Optional

from pydantic import BaseModel

from output_normalizer import EntityToId, NormalizerConfig, Output, OutputNormalizer


class User(BaseModel):
    """User entity using Pydantic"""
    id: int
    email: str
    passwordHash: str


@dataclass
class Order:
    """Order entity using dataclass"""
    id: int
    customer: User
    items: list = field(default_factory=list)


@dataclass
class CustomerOutput(Output):
    """Public view of a user"""
    id: int = 0
    email: str = ""


@dataclass
class OrderOutput(Output):
    """Public view of an order"""
    id: int = 0
    customer: Optional[CustomerOutput] = None
    itemCount: int = 0


@dataclass
class OrderSummaryOutput(Output):
    """Compact view that only references the customer"""
    id: int = 0
    customer: Annotated[Optional[User], EntityToId()] = None


class ItemCountModifier:
    """Derive a field that has no counterpart on the entity"""

    def supports(self, output, source):
        return isinstance(output, OrderOutput)

    def modify(self, output, source):
        output.itemCount = len(source.items)


def main():
    normalizer = OutputNormalizer.from_config(
        NormalizerConfig(),
        output_modifiers=[ItemCountModifier()],
    )

    alice = User(id=1, email="alice@example.com", passwordHash="...")
    orders = [Order(100, alice, ["book", "pen"]), Order(101, alice)]

    print("=== Output Shapes ===\n")

    print("1. Orders mapped onto OrderOutput:")
    print(json.dumps(normalizer.normalize(orders, OrderOutput), indent=2))
    print()

    print("2. Orders mapped onto OrderSummaryOutput:")
    print(json.dumps(normalizer.normalize(orders, OrderSummaryOutput), indent=2))


if __name__ == "__main__":
    main()
