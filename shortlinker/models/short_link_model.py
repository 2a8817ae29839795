from dataclasses import dataclass


@dataclass(frozen=True)
class ShortLinkModel:
    """Represent a stored short link.

    Attributes:
        id (str):
            The unique short identifier, used as the data store key.
        url (str):
            The submitted target URL.
        created_at (int):
            Creation time as epoch milliseconds. Set once, never updated.
        clicks (int):
            Redirect counter. Always 0 at creation; only the redirect path
            mutates it in the data store.

    Example:
        >>> link = ShortLinkModel(id='zxcvb', url='https://mydomain.com', created_at=1234567890)
        >>> link.clicks
        0
    """

    id: str
    url: str
    created_at: int
    clicks: int = 0
