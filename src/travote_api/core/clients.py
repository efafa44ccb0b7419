"""Construction of the process-wide AWS-backed clients.

The storage handle and token verifier are built once at startup from
settings and shared by every request.
"""

from typing import Any

import boto3

from travote_api.core.config import Settings
from travote_api.lib.social.facebook import FacebookTokenVerifier
from travote_api.lib.storage.dynamodb import Storage, create_dynamodb_resource


def create_storage(settings: Settings) -> Storage:
    """Create the shared DynamoDB storage handle.

    Args:
        settings: Application settings.

    Returns:
        Storage bound to the configured region, endpoint and table names.
    """
    resource = create_dynamodb_resource(settings.aws_region, settings.dynamodb_endpoint_url)
    return Storage(
        resource=resource,
        places_table_name=settings.places_table,
        countries_table_name=settings.countries_table,
    )


def create_secrets_client(settings: Settings) -> Any:
    """Create a boto3 Secrets Manager client for the configured region."""
    return boto3.client("secretsmanager", region_name=settings.aws_region)


def create_token_verifier(settings: Settings) -> FacebookTokenVerifier:
    """Create the shared Facebook token verifier."""
    return FacebookTokenVerifier(
        secrets_client=create_secrets_client(settings),
        secret_name=settings.facebook_secret_name,
        graph_url=settings.facebook_graph_url,
        timeout=settings.facebook_timeout,
    )
