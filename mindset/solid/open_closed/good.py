"""
Each customer type is its own implementation of `IDiscount`.
A new customer type is a new class; none of the existing ones change.

```python
def checkout(price: float, discount: IDiscount) -> float:
    return price - discount.apply_discount(price)

checkout(100, VIPDiscount())
```
"""

import logging
from typing import Protocol, runtime_checkable

from typing_extensions import override

logger = logging.getLogger(__name__)


@runtime_checkable
class IDiscount(Protocol):
    def apply_discount(self, price: float) -> float: ...


class RegularDiscount(IDiscount):
    @override
    def apply_discount(self, price: float) -> float:
        return price * 0.1


class VIPDiscount(IDiscount):
    @override
    def apply_discount(self, price: float) -> float:
        return price * 0.2


def apply_discount(policy: IDiscount, price: float) -> float:
    """
    The caller picks the policy by reference, no customer tag involved.
    """
    discount = policy.apply_discount(price)
    logger.debug("%s: %s off %s", type(policy).__name__, discount, price)
    return discount
