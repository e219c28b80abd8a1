"""
Request Schemas
===============

Pydantic models for validating API request bodies.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field


class ParseHtmlRequest(BaseModel):
    """Body of POST /api/parse-html"""

    html_source: str = Field(alias="htmlSource", min_length=1, description="Raw HTML pasted by the operator")
    template_structure: Optional[Any] = Field(default=None, alias="templateStructure",
                                              description="Optional site hint, e.g. 'housing' or {'site': 'housing'}")
    base_url: Optional[str] = Field(default=None, alias="baseUrl",
                                    description="Origin used to resolve relative image URLs")
