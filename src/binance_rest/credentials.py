from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """The API key pair used to authenticate requests.

    Both values default to an empty string so that a client can be built for
    public endpoints only.
    """

    api_key: str = ""
    secret_key: str = field(default="", repr=False)

    @classmethod
    def from_optional(
        cls, api_key: str | None = None, secret_key: str | None = None
    ) -> "Credentials":
        """Builds credentials, treating missing values as blank."""
        return cls(api_key=api_key or "", secret_key=secret_key or "")
