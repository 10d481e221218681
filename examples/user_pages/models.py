"""Models rendered by the user pages templates."""
from dataclasses import dataclass, field
from typing import Dict

from objadapt import entries


@dataclass
class User:
    name: str
    email: str
    roles: Dict[str, str] = field(default_factory=dict)

    def isAdmin(self):
        return "admin" in self.roles

    def getRoleEntries(self):
        return list(entries(self.roles))


def make_user():
    return User(name="Alice", email="alice@example.com", roles={"admin": "all projects"})


def make_role():
    return make_user().getRoleEntries()[0]
