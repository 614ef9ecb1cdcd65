"""User data models for Cognito user pool exports."""

from dataclasses import dataclass
from typing import Any

EMAIL_ATTRIBUTE = "email"


@dataclass(frozen=True)
class CognitoUser:
    """Represents the exported columns of a Cognito user."""

    username: str = ""
    email: str = ""

    @classmethod
    def from_cognito_data(cls, data: dict[str, Any]) -> "CognitoUser":
        """Create a CognitoUser from a ``ListUsers`` response item.

        Missing username, a missing ``email`` attribute, or an ``email``
        attribute without a value all map to the empty string.

        Args:
            data: User item from the ``Users`` list of a response

        Returns:
            CognitoUser: User instance with parsed data
        """
        username = data.get("Username") or ""

        email = ""
        for attribute in data.get("Attributes") or []:
            if attribute.get("Name") == EMAIL_ATTRIBUTE:
                email = attribute.get("Value") or ""
                break

        return cls(username=username, email=email)

    def to_row(self) -> list[str]:
        """Return the CSV row for this user."""
        return [self.username, self.email]
