"""
Entry points for reading and writing GPX documents
"""

from pathlib import Path
from typing import Optional, Union

from lxml import etree
from loguru import logger
from pydantic import ValidationError

from ..common.errors import GPXDecodeError, GPXEncodeError
from ..common.settings import CodecSettings
from .binding import GPXCodec
from .models import Document
from .types import GPX_NAMESPACE, TRACKPOINT_EXTENSION_NAMESPACE

NSMAP = {None: GPX_NAMESPACE, "gpxtpx": TRACKPOINT_EXTENSION_NAMESPACE}


def _xml_parser(encoding: Optional[str] = None) -> etree.XMLParser:
    # lxml parsers keep per-parse state, so each call gets its own
    return etree.XMLParser(encoding=encoding, resolve_entities=False, no_network=True)


def parse(
    data: bytes, target: Optional[Document] = None, encoding: Optional[str] = None
) -> Document:
    """Decode GPX bytes into a Document

    Args:
        data: Raw bytes of a GPX 1.1 document
        target: Optional Document to populate in place; it is only touched
            once the whole buffer has decoded successfully
        encoding: Byte encoding to use instead of the one the XML declaration
            names (or UTF-8 when there is none)

    Returns:
        The decoded Document (`target` itself when one was given)

    Raises:
        GPXDecodeError: The bytes are not well-formed XML, the root is not
            <gpx>, or a value cannot be coerced into its field type
    """
    if not data or not bytes(data).strip():
        raise GPXDecodeError("Empty document")

    try:
        root = etree.fromstring(bytes(data), parser=_xml_parser(encoding))
    except etree.XMLSyntaxError as exc:
        raise GPXDecodeError(f"Malformed XML: {exc}") from exc

    root_name = etree.QName(root).localname
    if root_name != Document.xml_tag:
        raise GPXDecodeError(
            f"Expected <{Document.xml_tag}> root element, found <{root_name}>"
        )

    document = GPXCodec.decode_element(Document, root)
    logger.debug(
        f"Decoded GPX {document.version or '?'} by '{document.creator}': "
        f"{len(document.waypoints)} waypoints, {len(document.routes)} routes, "
        f"{len(document.tracks)} tracks"
    )

    if target is None:
        return document

    for field_name in Document.model_fields:
        setattr(target, field_name, getattr(document, field_name))
    return target


def parse_string(text: str) -> Document:
    """Decode a GPX document held in a str

    The text is already decoded, so an encoding named in its XML declaration
    is ignored.
    """
    return parse(text.encode("utf-8"), encoding="utf-8")


def parse_file(path: Union[str, Path]) -> Document:
    """Read a GPX file fully into memory and decode it

    OSError subclasses (missing file, permission denied) propagate unchanged.
    """
    path = Path(path)
    data = path.read_bytes()
    logger.debug(f"Read {len(data)} bytes from {path}")
    return parse(data)


def encode(document: Document, settings: Optional[CodecSettings] = None) -> bytes:
    """Serialize a Document to GPX 1.1 bytes

    Empty optional fields are omitted; an empty version or creator is
    replaced by the configured default so the output stays valid GPX.
    """
    if settings is None:
        try:
            settings = CodecSettings()
        except ValidationError as exc:
            raise GPXEncodeError(f"Invalid GPXKIT_* settings: {exc}") from exc

    if not document.version or not document.creator:
        document = document.model_copy(
            update={
                "version": document.version or settings.default_version,
                "creator": document.creator or settings.default_creator,
            }
        )

    root = GPXCodec.encode_element(document, nsmap=NSMAP)
    output = etree.tostring(
        root,
        xml_declaration=settings.xml_declaration,
        encoding=settings.encoding,
        pretty_print=settings.pretty_print,
    )
    logger.debug(f"Encoded GPX document to {len(output)} bytes")
    return output


def write_file(
    document: Document,
    path: Union[str, Path],
    settings: Optional[CodecSettings] = None,
) -> Path:
    """Encode a Document and write it to `path`, creating parent directories"""
    path = Path(path)
    output = encode(document, settings)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(output)
    logger.debug(f"Wrote {len(output)} bytes to {path}")
    return path
