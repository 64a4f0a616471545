"""Parser for the ECB ``eurofxref-daily.xml`` reference feed."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Iterator

from lxml import etree

from eurofxref.errors import DataFailureError, DecodeFailureError
from eurofxref.ingestion.models import QueryResult, RateEntry, ReferenceRates
from eurofxref.utils.ecb import PUBLICATION_DATE_FORMAT
from eurofxref.utils.logger import get_logger

LOGGER = get_logger(__name__)

_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _local_name(element: etree._Element) -> str:
    return etree.QName(element).localname


def _children(element: etree._Element, name: str) -> Iterator[etree._Element]:
    # Comments and processing instructions carry a non-string tag.
    for child in element:
        if isinstance(child.tag, str) and _local_name(child) == name:
            yield child


def _first_child(element: etree._Element, name: str) -> etree._Element | None:
    return next(_children(element, name), None)


def _text_of(element: etree._Element | None) -> str | None:
    if element is None or element.text is None:
        return None
    return element.text.strip() or None


def parse_reference_document(content: bytes) -> ReferenceRates:
    """Decode the raw feed into :class:`ReferenceRates`.

    The feed nests three levels of ``Cube`` elements below a gesmes
    ``Envelope``::

        <gesmes:Envelope>
          <Cube>
            <Cube time="2023-05-17">
              <Cube currency="USD" rate="1.0852"/>
              ...

    Namespaces are matched by local name only. Anything that does not follow
    this shape raises :class:`DecodeFailureError`; no lenient recovery is
    attempted.
    """

    try:
        root = etree.fromstring(content, parser=_PARSER)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise DecodeFailureError(f"reference document is not well-formed XML: {exc}") from exc

    if _local_name(root) != "Envelope":
        raise DecodeFailureError(f"unexpected root element {_local_name(root)!r}, expected 'Envelope'")

    outer_cube = _first_child(root, "Cube")
    if outer_cube is None:
        raise DecodeFailureError("reference document has no Cube element")
    dated_cube = _first_child(outer_cube, "Cube")
    if dated_cube is None:
        raise DecodeFailureError("reference document has no dated Cube element")
    publication_date = dated_cube.get("time")
    if publication_date is None:
        raise DecodeFailureError("dated Cube element is missing its 'time' attribute")

    entries: list[RateEntry] = []
    for position, cube in enumerate(_children(dated_cube, "Cube")):
        currency = cube.get("currency")
        rate = cube.get("rate")
        if currency is None or rate is None:
            raise DecodeFailureError(
                f"rate entry #{position} is missing its 'currency' or 'rate' attribute"
            )
        entries.append(RateEntry(currency=currency.strip(), rate=rate.strip()))

    sender = _first_child(root, "Sender")
    rates = ReferenceRates(
        publication_date=publication_date.strip(),
        entries=tuple(entries),
        subject=_text_of(_first_child(root, "subject")),
        sender=_text_of(_first_child(sender, "name")) if sender is not None else None,
    )
    LOGGER.debug("Parsed %d rate entries published %s", len(entries), rates.publication_date)
    return rates


def parse_rate(value: str) -> float:
    """Convert a published rate string into a float."""

    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise DataFailureError(f"rate value {value!r} is not a number") from exc


def parse_publication_date(value: str) -> datetime:
    """Parse the ``time`` attribute of the dated cube (``YYYY-MM-DD``)."""

    message = f"publication date {value!r} does not match YYYY-MM-DD"
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise DataFailureError(message)
    try:
        return datetime.strptime(value, PUBLICATION_DATE_FORMAT)
    except ValueError as exc:
        raise DataFailureError(message) from exc


def find_rate(rates: ReferenceRates, currency_code: str) -> QueryResult:
    """Return the rate published for ``currency_code`` (case-insensitive)."""

    wanted = currency_code.upper()
    for entry in rates.entries:
        if entry.currency.upper() == wanted:
            return QueryResult(
                last_update=parse_publication_date(rates.publication_date),
                rate_value=parse_rate(entry.rate),
            )
    raise DataFailureError(
        f'no conversion rate value was returned for "{currency_code}" currency code'
    )


__all__ = [
    "find_rate",
    "parse_publication_date",
    "parse_rate",
    "parse_reference_document",
]
