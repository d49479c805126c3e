"""
Medicine lookup against the openFDA drug-label database.

Tries a fixed, ordered list of search expressions and normalizes the first
label that comes back. Also hosts the static autocomplete list.
"""

import re
import logging
from typing import Any, Dict, List, Optional

from .errors import InvalidInput, NotFound, ServiceUnavailable, UpstreamError, MedicineLookupError
from .label_client import BaseLabelClient, UpstreamRequestError

# Tried in this order; the first one returning a label wins
SEARCH_STRATEGIES = [
    'openfda.brand_name:"{name}"',
    'openfda.generic_name:"{name}"',
    'openfda.brand_name:{name}',
    'openfda.generic_name:{name}',
]

NOT_FOUND_SUGGESTIONS = [
    "Check the spelling of the medicine name",
    "Try using the generic name instead of brand name (or vice versa)",
    "Use the full medicine name without abbreviations",
]

COMMON_MEDICINES = [
    "Aspirin", "Ibuprofen", "Acetaminophen", "Amoxicillin", "Lisinopril",
    "Metformin", "Amlodipine", "Metoprolol", "Omeprazole", "Simvastatin",
    "Losartan", "Albuterol", "Gabapentin", "Sertraline", "Montelukast",
]

NOT_AVAILABLE = "N/A"
NO_INFORMATION = "Information not available"
MIN_QUERY_LENGTH = 2
MAX_SUGGESTIONS = 5

# ASCII word characters only; \s stays Unicode-aware
_DISALLOWED_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")


def sanitize_query(raw_query: str) -> str:
    """Keeps ASCII letters, digits, underscores, whitespace and hyphens only."""
    return _DISALLOWED_CHARS.sub("", raw_query.strip()).strip()


def _first(record: Dict[str, Any], *path: str) -> Optional[str]:
    value: Any = record
    for key in path:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    if isinstance(value, list) and value and isinstance(value[0], str):
        return value[0] or None
    return None


def format_medicine_data(record: Dict[str, Any], search_name: str) -> Dict[str, str]:
    """
    Maps a raw openFDA label onto the flat MedicineInfo shape.
    Missing or empty fields get their placeholder instead of None.
    """
    return {
        "name": search_name,
        "brandName": _first(record, "openfda", "brand_name") or search_name,
        "genericName": _first(record, "openfda", "generic_name") or NOT_AVAILABLE,
        "manufacturer": _first(record, "openfda", "manufacturer_name") or NOT_AVAILABLE,
        "indications": _first(record, "indications_and_usage") or NO_INFORMATION,
        "mechanism": _first(record, "mechanism_of_action") or NO_INFORMATION,
        "sideEffects": _first(record, "adverse_reactions") or NO_INFORMATION,
        "dosage": _first(record, "dosage_and_administration") or NO_INFORMATION,
        "precautions": _first(record, "warnings") or _first(record, "precautions") or NO_INFORMATION,
        "contraindications": _first(record, "contraindications") or NO_INFORMATION,
        "drugInteractions": _first(record, "drug_interactions") or NO_INFORMATION,
    }


def search_medicine(raw_query: Optional[str], client: Optional[BaseLabelClient]) -> Dict[str, str]:
    if not raw_query or not raw_query.strip():
        raise InvalidInput("Medicine name is required. Please enter a valid medicine name.")

    sanitized_name = sanitize_query(raw_query)
    if len(sanitized_name) < MIN_QUERY_LENGTH:
        raise InvalidInput("Medicine name must be at least 2 characters long.")

    if client is None:
        raise ServiceUnavailable("Service is initializing. Please try again in a moment.")

    try:
        medicine_data = None
        winning_strategy = None
        for template in SEARCH_STRATEGIES:
            strategy = template.format(name=sanitized_name)
            logging.info(f"Trying search strategy: {strategy}")
            try:
                results = client.search(strategy, limit=1)
            except UpstreamRequestError as e:
                logging.info(f"Strategy failed: {strategy} ({e})")
                continue
            if isinstance(results, list) and results:
                medicine_data = results[0]
                winning_strategy = strategy
                break

        if medicine_data is None:
            raise NotFound(
                f'No information found for "{sanitized_name}". '
                "Please check the spelling or try a different medicine name.",
                query=sanitized_name,
                suggestions=NOT_FOUND_SUGGESTIONS,
            )

        formatted = format_medicine_data(medicine_data, sanitized_name)
        logging.info(f"Found medicine data using strategy: {winning_strategy}")
        return formatted

    except MedicineLookupError:
        raise
    except Exception as e:
        logging.error(f"Error fetching medicine data: {e}", exc_info=True)
        raise UpstreamError(
            "Unable to retrieve medicine information at this time. Please try again later.",
            details="Our medical database service is temporarily unavailable.",
        ) from e


def suggest_medicines(query: Optional[str]) -> List[str]:
    if not query or len(query.strip()) < MIN_QUERY_LENGTH:
        return []
    try:
        needle = query.lower()
        matches = [med for med in COMMON_MEDICINES if needle in med.lower()]
        return matches[:MAX_SUGGESTIONS]
    except Exception as e:
        logging.error(f"Error getting suggestions: {e}")
        return []
