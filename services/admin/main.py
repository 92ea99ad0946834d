from __future__ import annotations

import logging
import uuid

from page_authoring.collaborators import NullMenuNotifier, StaticSession
from page_authoring.config import AuthoringSettings, build_page_store
from page_authoring.controller import FormController
from page_authoring.logging_config import set_session_id, setup_logging

# Environment configuration
settings = AuthoringSettings.from_env()

# Setup logging
setup_logging(environment=settings.environment, project_id=settings.project_id)
logger = logging.getLogger(__name__)

# Use Firestore or a JSON file when configured, in-memory otherwise
page_store = build_page_store(settings)


def build_controller() -> FormController:
    """Create the form controller for a new authoring session."""
    set_session_id(str(uuid.uuid4()))
    return FormController(
        store=page_store,
        session=StaticSession(logged_in=settings.logged_in),
        menu=NullMenuNotifier(),
    )


def main() -> None:
    controller = build_controller()
    view = controller.start()
    logger.info("Authoring session started", extra={"page_store": settings.page_store})
    print(view.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
