"""
RDAP payload parser.

Maps an RDAP domain object (RFC 9083), as fetched by the external RDAP
collaborator, onto RegistrationSignals. Only defined fields are read;
anything else in the payload is ignored.

Extracted fields:
- events: registration / last changed / expiration dates
- status: status flags (e.g. 'client transfer prohibited')
- nameservers: ldhName of each nameserver object
- entities: registrar name and abuse contact, registrant identity or redaction
"""

from dataclasses import dataclass
from typing import Any, Optional

from domain_recovery.enums import SignalErrorCode
from domain_recovery.exceptions import SignalError
from domain_recovery.signals import RegistrationSignals, parse_timestamp


EVENT_FIELDS = {
    "registration": "created_date",
    "last changed": "updated_date",
    "expiration": "expiry_date",
}

REDACTED_MARKERS = ("redacted", "data protected", "privacy", "withheld")


@dataclass
class RDAPEvent:
    """A single RDAP event (e.g., registration, expiration)."""

    event_action: str
    event_date: str


@dataclass
class VCardContact:
    """Fields read from an entity's jCard."""

    name: Optional[str] = None
    organization: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.name or self.organization or self.email or self.phone)


def registration_from_rdap(payload: Any) -> RegistrationSignals:
    """
    Parse an RDAP domain object into RegistrationSignals.

    Args:
        payload: Decoded JSON of an RDAP domain response

    Returns:
        RegistrationSignals populated from the defined RDAP fields

    Raises:
        SignalError: If the payload is not a domain object or a date is invalid
    """
    if not isinstance(payload, dict):
        raise SignalError(
            code=SignalErrorCode.INVALID_RDAP.value,
            message="RDAP payload must be a JSON object",
            details={"payload_type": type(payload).__name__},
        )

    object_class = payload.get("objectClassName")
    if object_class is not None and object_class != "domain":
        raise SignalError(
            code=SignalErrorCode.INVALID_RDAP.value,
            message=f"RDAP payload is not a domain object: {object_class!r}",
            details={"objectClassName": object_class},
        )

    dates = {}
    for event in parse_events(payload):
        field_name = EVENT_FIELDS.get(event.event_action.lower())
        if field_name and field_name not in dates:
            dates[field_name] = parse_timestamp(event.event_date, field_name)

    registrar_name = None
    abuse = VCardContact()
    registrant = VCardContact()
    registrant_redacted = False

    for entity in _entities(payload):
        roles = [str(role).lower() for role in entity.get("roles", []) or []]
        contact = parse_vcard(entity.get("vcardArray"))

        if "registrar" in roles:
            registrar_name = contact.name or contact.organization or registrar_name
            for nested in _entities(entity):
                nested_roles = [str(role).lower() for role in nested.get("roles", []) or []]
                if "abuse" in nested_roles:
                    abuse = parse_vcard(nested.get("vcardArray"))

        if "registrant" in roles:
            if contact.is_empty or _looks_redacted(contact):
                registrant_redacted = True
            else:
                registrant = contact

    return RegistrationSignals(
        registrar=registrar_name,
        registrar_abuse_email=abuse.email,
        registrar_abuse_phone=abuse.phone,
        created_date=dates.get("created_date"),
        updated_date=dates.get("updated_date"),
        expiry_date=dates.get("expiry_date"),
        registrant_name=registrant.name,
        registrant_organization=registrant.organization,
        registrant_email=registrant.email,
        registrant_redacted=registrant_redacted,
        nameservers=tuple(parse_nameservers(payload)),
        status_flags=tuple(parse_status(payload)),
    )


def parse_events(payload: dict) -> list[RDAPEvent]:
    """Extract well-formed events; entries without action or date are skipped."""
    events = []
    raw_events = payload.get("events", [])
    if isinstance(raw_events, list):
        for event in raw_events:
            if isinstance(event, dict):
                event_action = event.get("eventAction", "")
                event_date = event.get("eventDate", "")
                if event_action and event_date:
                    events.append(RDAPEvent(
                        event_action=str(event_action),
                        event_date=str(event_date),
                    ))
    return events


def parse_status(payload: dict) -> list[str]:
    """Extract the status array, tolerating a bare string."""
    status = payload.get("status", [])
    if not isinstance(status, list):
        status = [status] if status else []
    return [str(flag) for flag in status if flag]


def parse_nameservers(payload: dict) -> list[str]:
    """Extract lowercased nameserver host names."""
    nameservers = []
    raw_nameservers = payload.get("nameservers", [])
    if isinstance(raw_nameservers, list):
        for ns in raw_nameservers:
            if isinstance(ns, dict):
                ns_name = ns.get("ldhName") or ns.get("unicodeName", "")
                if ns_name:
                    nameservers.append(str(ns_name).lower().rstrip("."))
    return nameservers


def parse_vcard(vcard_array: Any) -> VCardContact:
    """
    Read name, organization, email and phone from a jCard array.

    jCard layout: ["vcard", [[name, params, type, value], ...]]
    """
    contact = VCardContact()
    if not isinstance(vcard_array, list) or len(vcard_array) < 2:
        return contact

    properties = vcard_array[1]
    if not isinstance(properties, list):
        return contact

    for prop in properties:
        if not isinstance(prop, list) or len(prop) < 4:
            continue
        key = str(prop[0]).lower()
        value = prop[3]
        if isinstance(value, list):
            value = " ".join(str(part) for part in value if part)
        value = str(value).strip() if value is not None else ""
        if not value:
            continue

        if key == "fn" and contact.name is None:
            contact.name = value
        elif key == "org" and contact.organization is None:
            contact.organization = value
        elif key == "email" and contact.email is None:
            contact.email = value
        elif key == "tel" and contact.phone is None:
            contact.phone = value[4:] if value.lower().startswith("tel:") else value

    return contact


def _entities(obj: dict) -> list[dict]:
    entities = obj.get("entities", [])
    if not isinstance(entities, list):
        return []
    return [entity for entity in entities if isinstance(entity, dict)]


def _looks_redacted(contact: VCardContact) -> bool:
    text = " ".join(
        value for value in (contact.name, contact.organization, contact.email) if value
    ).lower()
    return any(marker in text for marker in REDACTED_MARKERS)
