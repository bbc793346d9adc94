from __future__ import annotations

import logging

from precise_money import Amount, RangeError


logger = logging.getLogger(__name__)


def main() -> None:
    price = Amount("25.90")

    # Plain floats: 25.9 - 6.475 = 19.424999999999997
    discounted = price.subtract_percent(25)
    logger.info(f"Price {price} with 25% discount: {discounted} (full value {discounted.value!r})")

    # Add 21% VAT on the discounted price
    with_vat = discounted.add_percent(21)
    logger.info(f"Discounted price with 21% VAT: {with_vat} (full value {with_vat.value!r})")

    # Split the bill three ways, keeping four digits
    share = with_vat.multiply("0.333333")
    logger.info(f"One third of the bill: {share.format(4)}")

    try:
        Amount(9007199256).add(1)
    except RangeError as e:
        logger.warning(f"Refused calculation: {e}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    main()
