"""Import property API resource."""

import logging

import falcon
import falcon.asgi

from propimport.application.dto.import_dto import ImportPropertyInput, PropertyOutput
from propimport.application.use_cases.property.import_property import ImportPropertyUseCase
from propimport.domain.exceptions import ErrorKind, PropertyImportError

logger = logging.getLogger(__name__)

_STATUS_BY_KIND: dict[ErrorKind, str] = {
    ErrorKind.VALIDATION: falcon.HTTP_400,
    ErrorKind.AUTHENTICATION: falcon.HTTP_401,
}


def status_for(error: PropertyImportError) -> str:
    """HTTP status for an import error; anything not caller-caused is a 500."""
    return _STATUS_BY_KIND.get(error.kind, falcon.HTTP_500)


class ImportPropertyResource:
    """POST /v1/import-property - import a property from a PDF URL."""

    def __init__(self, import_property: ImportPropertyUseCase) -> None:
        self._import_property = import_property

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Fetch, extract, complete and store. Body: {pdfUrl, fileName}."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": getattr(req.context, "auth_error", "Unauthorized")}
            return

        try:
            body = await req.get_media()
        except (falcon.MediaNotFoundError, falcon.MediaMalformedError):
            body = None
        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        pdf_url = body.get("pdfUrl")
        file_name = body.get("fileName")
        if not isinstance(pdf_url, str) or not pdf_url.strip():
            resp.status = falcon.HTTP_400
            resp.media = {"error": "PDF URL is required"}
            return

        try:
            result = await self._import_property.execute(
                user.user_id,
                ImportPropertyInput(
                    pdf_url=pdf_url.strip(),
                    file_name=file_name if isinstance(file_name, str) else None,
                ),
            )
        except PropertyImportError as e:
            logger.error("import-property failed: %s", e.to_dict())
            resp.status = status_for(e)
            resp.media = {"error": e.message}
            return

        resp.status = falcon.HTTP_200
        resp.media = {"success": True, "property": property_to_dict(result)}


def property_to_dict(p: PropertyOutput) -> dict:
    return {
        "id": str(p.id),
        "user_id": p.user_id,
        "address": p.address,
        "price": p.price,
        "bedrooms": p.bedrooms,
        "bathrooms": p.bathrooms,
        "car_spaces": p.car_spaces,
        "land_area_sqm": p.land_area_sqm,
        "house_area_sqm": p.house_area_sqm,
        "description": p.description,
        "features": p.features,
        "status": p.status,
        "source_pdf_name": p.source_pdf_name,
        "created_at": p.created_at.isoformat(),
    }
