"""Real-time estimate calculation.

Given an organization and the services/modifiers picked in the booking or
assessment form, build itemized line items and roll them up into subtotal,
discount, tax and total. The calculation backs a live preview, so it never
raises for bad references: anything missing, owned by another organization,
or carrying an unusable price is left out of the estimate.

Rounding happens to the cent at every stage (subtotal, discount, taxable
amount, tax, total), halves away from zero. Rounding only once at the end
would drift by a cent on some baskets.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Iterable, List, Literal, Optional, Sequence

from sqlalchemy.orm import Session

from .. import crud
from ..core.config import settings
from ..utils.money import is_valid_price, is_valid_rate, round2, to_decimal

logger = logging.getLogger(__name__)

LineItemType = Literal["service", "modifier"]

_ZERO = Decimal("0")


@dataclass(frozen=True)
class LineItem:
    type: LineItemType
    name: str
    price: Decimal

    def as_dict(self) -> dict:
        return {"type": self.type, "name": self.name, "price": str(self.price)}


@dataclass(frozen=True)
class Estimate:
    line_items: List[LineItem] = field(default_factory=list)
    subtotal: Decimal = Decimal("0.00")
    discount: Decimal = Decimal("0.00")
    tax: Decimal = Decimal("0.00")
    total: Decimal = Decimal("0.00")


def _line_item(
    kind: LineItemType, record: Any, org_id: int, price_attr: str, ref: Any
) -> Optional[LineItem]:
    if record is None:
        logger.debug("estimate: %s %s missing; skipped", kind, ref)
        return None
    if record.org_id != org_id:
        logger.debug(
            "estimate: %s %s belongs to org %s, not %s; skipped",
            kind,
            ref,
            record.org_id,
            org_id,
        )
        return None
    price = to_decimal(getattr(record, price_attr, None))
    if not is_valid_price(price):
        logger.debug("estimate: %s %s has unusable price %r; skipped", kind, ref, price)
        return None
    return LineItem(type=kind, name=record.name, price=price)


def build_line_items(
    org_id: int,
    services: Sequence[Any],
    modifiers: Sequence[Any],
) -> List[LineItem]:
    """Services first, then modifiers, each group in the order given.

    ``None`` entries stand for references that did not resolve.
    """
    items: List[LineItem] = []
    for idx, svc in enumerate(services):
        item = _line_item("service", svc, org_id, "unit_price", getattr(svc, "id", idx))
        if item is not None:
            items.append(item)
    for idx, mod in enumerate(modifiers):
        item = _line_item("modifier", mod, org_id, "price", getattr(mod, "id", idx))
        if item is not None:
            items.append(item)
    return items


def summarize(
    line_items: Sequence[LineItem],
    tax_rate: Any = None,
    discount_percentage: Any = None,
) -> Estimate:
    """Roll line items up into totals.

    Rates outside ``[0, 1)`` fall back to the configured ones, so the
    discount never exceeds the subtotal.
    """
    tax_rate = _rate(tax_rate, settings.TAX_RATE, "tax_rate")
    discount_percentage = _rate(
        discount_percentage, settings.DISCOUNT_PERCENTAGE, "discount_percentage"
    )
    subtotal = round2(sum((item.price for item in line_items), _ZERO))
    discount = round2(subtotal * discount_percentage)
    taxable_subtotal = max(_ZERO, round2(subtotal - discount))
    tax = round2(taxable_subtotal * tax_rate)
    total = round2(taxable_subtotal + tax)
    return Estimate(
        line_items=list(line_items),
        subtotal=subtotal,
        discount=discount,
        tax=tax,
        total=total,
    )


def _rate(value: Any, default: Decimal, name: str) -> Decimal:
    if value is None:
        return default
    rate = to_decimal(value)
    if not is_valid_rate(rate):
        logger.warning("estimate: %s %r is not a fraction in [0, 1); using %s", name, value, default)
        return default
    return rate


def calculate_estimate(
    db: Session,
    org_id: int,
    service_ids: Iterable[int],
    modifier_ids: Iterable[int],
    *,
    tax_rate: Any = None,
    discount_percentage: Any = None,
) -> Estimate:
    """Price a selection for ``org_id``.

    Services and modifiers are fetched in one batch each and re-sequenced to
    match the requested order. Rates default to ``settings.TAX_RATE`` and
    ``settings.DISCOUNT_PERCENTAGE``.
    """
    service_ids = list(service_ids)
    modifier_ids = list(modifier_ids)

    services_by_id = crud.service.get_many(db, service_ids)
    modifiers_by_id = crud.modifier.get_many(db, modifier_ids)

    line_items = build_line_items(
        org_id,
        [services_by_id.get(sid) for sid in service_ids],
        [modifiers_by_id.get(mid) for mid in modifier_ids],
    )
    return summarize(
        line_items,
        tax_rate=tax_rate,
        discount_percentage=discount_percentage,
    )
