"""
Record decoder turning remote JSON payloads into canonical records.

Every remote endpoint has a fixed shape: an envelope (a flat JSON array, or
an ``{"index": [...]}`` wrapper) plus the record type found inside it.
Decoding is permissive about content and strict about structure:

- unknown JSON fields are ignored and known ones match case-insensitively;
- a ``null`` document decodes to an empty collection;
- missing or ``null`` fields take their zero value (0, '', [], {});
- malformed JSON, a top-level type mismatch, or a field holding the wrong
  JSON type raise :class:`DecodeError`.
"""
import json
from collections import namedtuple

from utils.errors import DecodeError
from ..models.records import Artist, ConcertDate, Location, Relation

INT = 'int'
STR = 'str'
STR_LIST = 'str_list'
STR_LIST_MAP = 'str_list_map'

ZERO_VALUES = {
    INT: int,
    STR: str,
    STR_LIST: list,
    STR_LIST_MAP: dict,
}

# JSON key, record attribute, field kind
Field = namedtuple('Field', ['key', 'attr', 'kind'])

RecordShape = namedtuple('RecordShape', ['name', 'envelope', 'record_type', 'fields'])


class FlatArrayEnvelope:
    """Records sent as a bare JSON array: ``[{...}, {...}]``"""

    name = 'flat'

    def unwrap(self, document):
        if not isinstance(document, list):
            raise DecodeError(
                f"expected a JSON array of records, got {_json_type(document)}")
        return document


class IndexedEnvelope:
    """Records wrapped in an object: ``{"index": [{...}, {...}]}``"""

    name = 'index'

    def unwrap(self, document):
        if not isinstance(document, dict):
            raise DecodeError(
                f"expected a JSON object with an 'index' array, got {_json_type(document)}")
        records = document.get('index')
        if records is None:
            return []
        if not isinstance(records, list):
            raise DecodeError(
                f"expected 'index' to be an array, got {_json_type(records)}")
        return records


FLAT_ARRAY = FlatArrayEnvelope()
INDEXED = IndexedEnvelope()

ARTIST_FIELDS = (
    Field('id', 'id', INT),
    Field('name', 'name', STR),
    Field('image', 'image', STR),
    Field('members', 'members', STR_LIST),
    Field('creationDate', 'creation_date', INT),
    Field('firstAlbum', 'first_album', STR),
    Field('locations', 'locations', STR),
    Field('concertDates', 'concert_dates', STR),
    Field('relations', 'relations', STR),
)

LOCATION_FIELDS = (
    Field('id', 'id', INT),
    Field('locations', 'locations', STR_LIST),
    Field('dates', 'dates', STR),
)

DATE_FIELDS = (
    Field('id', 'id', INT),
    Field('dates', 'dates', STR_LIST),
)

RELATION_FIELDS = (
    Field('id', 'id', INT),
    Field('datesLocations', 'dates_locations', STR_LIST_MAP),
)

ARTISTS = RecordShape('artists', FLAT_ARRAY, Artist, ARTIST_FIELDS)
LOCATIONS = RecordShape('locations', INDEXED, Location, LOCATION_FIELDS)
DATES = RecordShape('dates', INDEXED, ConcertDate, DATE_FIELDS)
RELATIONS = RecordShape('relations', INDEXED, Relation, RELATION_FIELDS)

# Fixed contract between each remote endpoint and its shape
ENDPOINT_SHAPES = {
    'artists': ARTISTS,
    'locations': LOCATIONS,
    'dates': DATES,
    'relations': RELATIONS,
}


def decode(payload, shape):
    """Decode a raw JSON payload into a list of records of the given shape"""
    try:
        document = json.loads(payload)
    except ValueError as e:
        raise DecodeError(f"invalid JSON in {shape.name} response: {e}") from e

    # A null document is an empty collection, whatever the envelope
    if document is None:
        return []

    records = []
    for position, raw in enumerate(shape.envelope.unwrap(document)):
        records.append(_build_record(raw, shape, position))
    return records


def _build_record(raw, shape, position):
    if raw is None:
        return shape.record_type()
    if not isinstance(raw, dict):
        raise DecodeError(
            f"{shape.name} record #{position} is {_json_type(raw)}, expected an object")

    # Keys match case-insensitively; the last matching key wins
    folded = {key.casefold(): value for key, value in raw.items()}

    values = {}
    for entry in shape.fields:
        try:
            values[entry.attr] = _read_field(folded.get(entry.key.casefold()), entry.kind)
        except TypeError as e:
            raise DecodeError(
                f"{shape.name} record #{position}: field '{entry.key}' {e}") from e
    return shape.record_type(**values)


def _read_field(value, kind):
    if value is None:
        return ZERO_VALUES[kind]()

    if kind == INT:
        # bool is an int subclass but never a valid JSON number here
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"must be an integer, got {_json_type(value)}")
        return value

    if kind == STR:
        if not isinstance(value, str):
            raise TypeError(f"must be a string, got {_json_type(value)}")
        return value

    if kind == STR_LIST:
        return _read_str_list(value)

    if kind == STR_LIST_MAP:
        if not isinstance(value, dict):
            raise TypeError(f"must be an object, got {_json_type(value)}")
        return {key: _read_str_list(items) if items is not None else []
                for key, items in value.items()}

    raise ValueError(f"Unknown field kind: {kind}")


def _read_str_list(value):
    if not isinstance(value, list):
        raise TypeError(f"must be an array of strings, got {_json_type(value)}")
    items = []
    for item in value:
        if item is None:
            items.append('')
        elif isinstance(item, str):
            items.append(item)
        else:
            raise TypeError(f"must only hold strings, got {_json_type(item)}")
    return items


def _json_type(value):
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'a boolean'
    if isinstance(value, (int, float)):
        return 'a number'
    if isinstance(value, str):
        return 'a string'
    if isinstance(value, list):
        return 'an array'
    return 'an object'
