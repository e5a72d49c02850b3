"""
Example 01: Basic Normalization

This example demonstrates turning nested domain objects into JSON-ready data.
"""

import datetime
import json
from dataclasses import dataclass, field
from enum import Enum

from output_normalizer import OutputNormalizer, default_object_normalizers


class Role(Enum):
    ADMIN = "admin"
    MEMBER = "member"


@dataclass
class Member:
    """Team member entity"""
    fullName: str
    role: Role
    joinedAt: datetime.date


@dataclass
class Team:
    """Team aggregate"""
    teamName: str
    members: list = field(default_factory=list)


def main():
    normalizer = OutputNormalizer(default_object_normalizers())

    team = Team(
        "Platform",
        [
            Member("Alice Smith", Role.ADMIN, datetime.date(2021, 3, 1)),
            Member("Bob Jones", Role.MEMBER, datetime.date(2023, 9, 15)),
        ],
    )

    print("=== Basic Normalization ===\n")

    print("1. Domain object:")
    print(f"   {team}\n")

    print("2. Normalized:")
    print(json.dumps(normalizer.normalize(team), indent=2))
    print()

    print("3. Arrays with integer keys become lists:")
    print(f"   {normalizer.normalize({3: 'c', 1: 'a'})}")


if __name__ == "__main__":
    main()
