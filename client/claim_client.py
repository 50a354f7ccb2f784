"""
httpx client for the public prize claim form.

Runs the same validation as the server before anything leaves the machine, so
a form that would be rejected (missing fields, unchecked agreements, a bad or
oversized document) never issues a request.
"""
from __future__ import annotations

import mimetypes
from typing import Any

import httpx

from services.claims import ClaimDocument, ClaimForm, ClaimValidationError, check_document, validate_claim_form


class ClaimSubmitError(Exception):
    """The server refused the claim."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ClaimClient:
    def __init__(
        self,
        base_url: str,
        token: str,
        winner_id: int,
        requires_w9: bool = False,
        http_client: httpx.Client | None = None,
        max_bytes: int | None = None,
    ):
        self.token = token
        self.winner_id = winner_id
        self.requires_w9 = requires_w9
        self.max_bytes = max_bytes
        self.form = ClaimForm()
        # field -> message for the last rejected attachment
        self.errors: dict[str, str] = {}
        self._http = http_client or httpx.Client(base_url=base_url, timeout=30.0)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "ClaimClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def fetch_claim_page(self) -> dict[str, Any]:
        """Load the claim page view model and pick up whether a W-9 is needed."""
        r = self._http.get(f"/claim/{self.token}")
        body = self._json(r)
        data = body.get("data") or {}
        self.requires_w9 = bool(data.get("requiresW9"))
        return data

    def attach_w9(self, filename: str, content: bytes, content_type: str | None = None) -> bool:
        return self._attach("w9_document", filename, content, content_type)

    def attach_id(self, filename: str, content: bytes, content_type: str | None = None) -> bool:
        return self._attach("id_document", filename, content, content_type)

    def _attach(self, field: str, filename: str, content: bytes, content_type: str | None) -> bool:
        content_type = content_type or mimetypes.guess_type(filename)[0] or "application/octet-stream"
        doc = ClaimDocument(filename=filename, content_type=content_type, content=content)
        try:
            check_document(doc, field, self.max_bytes)
        except ClaimValidationError as e:
            setattr(self.form, field, None)
            self.errors[field] = str(e)
            return False
        setattr(self.form, field, doc)
        self.errors.pop(field, None)
        return True

    def submit(self, **fields: Any) -> dict[str, Any]:
        """
        Fill the form from keyword arguments (legal_name, address_line1, ...,
        agree_terms, confirm_identity) and post it. Raises ClaimValidationError
        without contacting the server when the form is incomplete.
        """
        for key, value in fields.items():
            if not hasattr(self.form, key) or key in ("w9_document", "id_document"):
                raise TypeError(f"Unknown claim field: {key}")
            setattr(self.form, key, value)
        validate_claim_form(self.form, self.requires_w9, self.max_bytes)

        f = self.form
        data = {
            "token": self.token,
            "winnerId": str(self.winner_id),
            "legalName": f.legal_name,
            "addressLine1": f.address_line1,
            "addressLine2": f.address_line2 or "",
            "city": f.city,
            "state": f.state,
            "zipCode": f.zip_code,
            "agreeTerms": "true" if f.agree_terms else "false",
            "confirmIdentity": "true" if f.confirm_identity else "false",
        }
        files = {}
        if f.w9_document:
            files["w9Document"] = (f.w9_document.filename, f.w9_document.content, f.w9_document.content_type)
        if f.id_document:
            files["idDocument"] = (f.id_document.filename, f.id_document.content, f.id_document.content_type)
        r = self._http.post("/api/giveaways/claim", data=data, files=files or None)
        return self._json(r)

    @staticmethod
    def _json(r: httpx.Response) -> dict[str, Any]:
        try:
            body = r.json()
        except ValueError:
            body = {}
        if r.status_code >= 400 or not body.get("success"):
            raise ClaimSubmitError(body.get("error") or f"Request failed ({r.status_code})", r.status_code)
        return body
