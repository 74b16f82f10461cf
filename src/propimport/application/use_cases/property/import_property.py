"""Import property use case."""

import asyncio
import json
import logging
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from propimport.application.dto.import_dto import ImportPropertyInput, PropertyOutput
from propimport.application.ports import (
    CompletionProvider,
    PdfFetcher,
    TextExtractor,
    UnitOfWorkFactory,
)
from propimport.domain.entities import PropertyRecord
from propimport.domain.exceptions import CompletionParseError, ValidationError
from propimport.domain.value_objects import (
    EXTRACTION_FIELDS,
    EXTRACTION_SCHEMA,
    ImportStatus,
)

logger = logging.getLogger(__name__)


def build_instruction() -> str:
    """System instruction describing the extraction schema."""
    schema = json.dumps({k: v.value for k, v in EXTRACTION_SCHEMA.items()}, indent=2)
    return (
        "You are a highly specialized real estate data extraction bot. "
        "Your task is to parse the provided text from a real estate property PDF "
        "and extract key details into a structured JSON format. "
        f"The output must strictly adhere to the following JSON schema: {schema}"
    )


def parse_completion(content: str | None) -> dict[str, Any]:
    """Parse completion content into a JSON object or raise CompletionParseError."""
    if not content:
        raise CompletionParseError("Completion returned no content")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise CompletionParseError(f"Completion is not valid JSON: {e.msg}") from e
    if not isinstance(data, dict):
        raise CompletionParseError("Completion is not a JSON object")
    return data


class ImportPropertyUseCase:
    """Fetch PDF, extract text, complete against schema, save property record."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        pdf_fetcher: PdfFetcher,
        text_extractor: TextExtractor,
        completion_provider: CompletionProvider,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._pdf_fetcher = pdf_fetcher
        self._text_extractor = text_extractor
        self._completion_provider = completion_provider

    async def execute(self, user_id: str, input_data: ImportPropertyInput) -> PropertyOutput:
        """Run the import pipeline for one PDF. Any failing step ends the import."""
        if not input_data.pdf_url:
            raise ValidationError("PDF URL is required")

        pdf_bytes = await self._pdf_fetcher.fetch(input_data.pdf_url)
        text = await asyncio.to_thread(self._text_extractor.extract, pdf_bytes)
        logger.debug("Extracted %d characters from %s", len(text), input_data.file_name)
        content = await self._completion_provider.complete_json(build_instruction(), text)
        extracted = parse_completion(content)

        record = PropertyRecord(
            id=uuid4(),
            user_id=user_id,
            source_pdf_name=input_data.file_name,
            created_at=datetime.now(UTC),
            status=ImportStatus.IMPORTED,
            **{name: extracted.get(name) for name in EXTRACTION_FIELDS},
        )

        async with self._uow_factory() as uow:
            await uow.properties.create(record)

        logger.info("Imported property %s for user %s", record.id, user_id)
        return to_output(record)


def to_output(record: PropertyRecord) -> PropertyOutput:
    return PropertyOutput(
        id=record.id,
        user_id=record.user_id,
        address=record.address,
        price=record.price,
        bedrooms=record.bedrooms,
        bathrooms=record.bathrooms,
        car_spaces=record.car_spaces,
        land_area_sqm=record.land_area_sqm,
        house_area_sqm=record.house_area_sqm,
        description=record.description,
        features=record.features,
        status=record.status.value,
        source_pdf_name=record.source_pdf_name,
        created_at=record.created_at,
    )
