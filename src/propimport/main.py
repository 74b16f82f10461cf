"""Application entry point and composition root."""

import argparse
import asyncio
import logging
import mimetypes
import sys
from pathlib import Path

from propimport import __version__
from propimport.application.dto.upload_dto import SelectedFile
from propimport.application.use_cases.property.import_property import ImportPropertyUseCase
from propimport.application.use_cases.upload.upload_listing import UploadListingUseCase
from propimport.config import Settings, get_settings
from propimport.domain.exceptions import AuthenticationError
from propimport.infrastructure.auth.keycloak_provider import (
    KeycloakProvider,
    KeycloakSessionProvider,
)
from propimport.infrastructure.completion.openai_provider import OpenAICompletionProvider
from propimport.infrastructure.document_parsers import PdfTextExtractor
from propimport.infrastructure.http.import_function_client import HttpImportFunctionClient
from propimport.infrastructure.http.pdf_fetcher import HttpPdfFetcher
from propimport.infrastructure.persistence.postgres.connection import create_pool
from propimport.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from propimport.infrastructure.storage.s3_storage import S3ObjectStorage
from propimport.interfaces.api.app import create_app
from propimport.interfaces.api.resources.import_property import ImportPropertyResource


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_propimport_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    pool = create_pool(settings.database_url)
    uow_factory = create_uow_factory(pool)

    keycloak = KeycloakProvider(
        server_url=settings.keycloak_url,
        realm=settings.keycloak_realm,
        client_id=settings.keycloak_client_id,
        client_secret=settings.keycloak_client_secret,
    )
    import_property = ImportPropertyUseCase(
        unit_of_work_factory=uow_factory,
        pdf_fetcher=HttpPdfFetcher(timeout=settings.pdf_fetch_timeout),
        text_extractor=PdfTextExtractor(),
        completion_provider=OpenAICompletionProvider(
            base_url=settings.openai_api_url,
            api_key=settings.openai_api_key,
            model=settings.completion_model,
        ),
    )

    cors_origins = [
        o.strip() for o in settings.cors_origins.split(",") if o.strip()
    ]
    return create_app(
        ImportPropertyResource(import_property),
        identity_provider=keycloak,
        cors_origins=cors_origins,
        pool=pool,
    )


def create_uploader(settings: Settings, session_provider: KeycloakSessionProvider) -> UploadListingUseCase:
    """Wire the uploading side against storage and the import endpoint."""
    storage = S3ObjectStorage(
        bucket=settings.storage_bucket,
        region=settings.storage_region,
        endpoint_url=settings.storage_endpoint_url,
        public_base_url=settings.storage_public_base_url,
        url_expiry=settings.storage_url_expiry,
    )
    return UploadListingUseCase(
        session_provider=session_provider,
        storage=storage,
        import_client=HttpImportFunctionClient(settings.import_function_url),
    )


def read_selected_file(path: Path) -> SelectedFile:
    content_type, _ = mimetypes.guess_type(path.name)
    return SelectedFile(name=path.name, content_type=content_type, data=path.read_bytes())


def run_server(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Run uvicorn server."""
    import uvicorn

    uvicorn.run(create_propimport_app(), host=host, port=port)


def run_upload(args: argparse.Namespace, settings: Settings) -> int:
    session_provider = KeycloakSessionProvider(
        server_url=settings.keycloak_url,
        realm=settings.keycloak_realm,
        client_id=settings.keycloak_client_id,
        client_secret=settings.keycloak_client_secret,
    )
    try:
        session_provider.login(args.username, args.password)
    except AuthenticationError as e:
        print(e.message, file=sys.stderr)
        return 1

    uploader = create_uploader(settings, session_provider)
    try:
        rejected = uploader.select(read_selected_file(Path(args.file)))
        if rejected:
            print(rejected.message, file=sys.stderr)
            return 1
        notification = asyncio.run(uploader.submit())
    finally:
        uploader.sign_out()

    print(notification.message, file=sys.stdout if notification.ok else sys.stderr)
    return 0 if notification.ok else 1


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="propimport", description="Property PDF importer")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the import API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=8000)

    upload = sub.add_parser("upload", help="Upload a PDF listing and import it")
    upload.add_argument("file", help="Path to the PDF")
    upload.add_argument("--username", required=True)
    upload.add_argument("--password", required=True)

    sub.add_parser("version", help="Print version")

    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command == "version":
        print(f"propimport v{__version__}")
        return 0
    if args.command == "serve":
        run_server(args.host, args.port)
        return 0
    return run_upload(args, settings)


if __name__ == "__main__":
    sys.exit(main())
