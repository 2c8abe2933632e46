"""
oaiclient - typed async client for the OpenAI HTTP API

Covers completions, edits, images and models. Requests are assembled with
chained builders and every call returns a Result instead of raising.

Usage:
    from oaiclient import completions, models, CompletionModels

    # OPENAI_API_KEY from the environment or a .env file
    result = await (
        completions.build(CompletionModels.TEXT_DAVINCI_003)
        .prompt("Ice cream or cookies?")
        .max_tokens(32)
        .complete()
    )
    if result.is_ok():
        print(result.value.text)
    else:
        print(f"HTTP error {result.error}")

    # Shared configuration
    client = OAIClient(ClientConfig(api_key="sk-..."))
    result = await client.list_models()
"""

from . import completions, edits, images, models
from .catalog import CompletionModels, CustomModel, EditModels, model_name
from .client import OAIClient
from .config import ClientConfig
from .errors import BuilderConsumedError, ConfigurationError
from .requester import ImageRequestType, Requester
from .result import Err, Ok, Result, ResultError
from .types import (
    Completion,
    CompletionChoice,
    Edit,
    EditChoice,
    ImageURL,
    Images,
    Model,
    ModelList,
    ModelPermissions,
    Usage,
)

__all__ = [
    # Endpoints
    "completions",
    "edits",
    "images",
    "models",
    # Client
    "OAIClient",
    "ClientConfig",
    "Requester",
    "ImageRequestType",
    # Catalog
    "CompletionModels",
    "EditModels",
    "CustomModel",
    "model_name",
    # Response types
    "Completion",
    "CompletionChoice",
    "Edit",
    "EditChoice",
    "Images",
    "ImageURL",
    "Model",
    "ModelList",
    "ModelPermissions",
    "Usage",
    # Errors
    "ConfigurationError",
    "BuilderConsumedError",
    # Result
    "Result",
    "Ok",
    "Err",
    "ResultError",
]

__version__ = "0.1.0"
