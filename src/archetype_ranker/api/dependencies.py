"""
Dependency injection for API endpoints.

The classifier is built once during application startup and stored on
app.state. Routes only ever read it, so requests share it without locking.
"""

from typing import Annotated

from fastapi import Depends, Request

from ..classifier import Classifier
from ..core.config import Settings, get_settings
from .errors import ServiceUnavailableError


def get_classifier(request: Request) -> Classifier:
    """
    Dependency that provides the loaded classifier.

    Raises:
        ServiceUnavailableError: If the archetype model failed to load
    """
    classifier = getattr(request.app.state, "classifier", None)
    if classifier is None:
        raise ServiceUnavailableError()
    return classifier


# Type aliases for dependency injection
ClassifierDependency = Annotated[Classifier, Depends(get_classifier)]
SettingsDependency = Annotated[Settings, Depends(get_settings)]
