from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import Client


class Service:
    """Base for sub-services. Holds nothing but a reference to the owning Client."""

    def __init__(self, client: "Client"):
        self.client = client
