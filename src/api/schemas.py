
"""
Pydantic Models for the Open Clinic API

This module defines the response bodies of the medicine lookup endpoints.
Field names are snake_case in Python and camelCase on the wire, matching the
JSON the web page and the dashboard consume.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

# ==============================================================================
# API Schemas
# ==============================================================================

class MedicineInfo(BaseModel):
    """Normalized subset of a drug label."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="The sanitized name that was searched.", examples=["Ibuprofen"])
    brand_name: str = Field(..., alias="brandName", description="First brand name on the label.", examples=["Advil"])
    generic_name: str = Field(..., alias="genericName", description="First generic name on the label.", examples=["IBUPROFEN"])
    manufacturer: str = Field(..., description="Labeler / manufacturer.", examples=["Pfizer Consumer Healthcare"])
    indications: str = Field(..., description="Indications and usage.")
    mechanism: str = Field(..., description="Mechanism of action.")
    side_effects: str = Field(..., alias="sideEffects", description="Adverse reactions.")
    dosage: str = Field(..., description="Dosage and administration.")
    precautions: str = Field(..., description="Warnings, or precautions when no warnings are listed.")
    contraindications: str = Field(...)
    drug_interactions: str = Field(..., alias="drugInteractions")

class SuggestionsResponse(BaseModel):
    """Autocomplete matches from the common medicines list."""
    suggestions: List[str] = Field(default_factory=list, examples=[["Ibuprofen"]])

class HealthResponse(BaseModel):
    status: str = Field(..., examples=["OK"])
    timestamp: str = Field(..., description="ISO-8601 UTC time of the check.")

class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""
    error: str
    suggestions: Optional[List[str]] = None
    details: Optional[str] = None
