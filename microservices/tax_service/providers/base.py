"""Tax provider interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..models import CommonOrder, TaxServiceDescriptor


class TaxProvider(ABC):
    """Abstract tax provider."""

    name: str = ""
    display_name: str = ""

    @abstractmethod
    async def calculate_order_taxes(self, *, context: Any, order: CommonOrder) -> Optional[Any]:
        """Calculate taxes for an order, or return None when it cannot."""
        raise NotImplementedError

    def descriptor(self) -> TaxServiceDescriptor:
        """Descriptor a plugin registers for this provider."""
        return TaxServiceDescriptor(name=self.name, display_name=self.display_name, service=self)
