from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore

logger = logging.getLogger(__name__)


@dataclass
class FirebaseConfig:
    credentials_path: str = ""
    project_id: Optional[str] = None
    app_name: str = "[DEFAULT]"


class FirebaseConnection:
    """Explicit handle to one initialized firebase_admin app.

    Note: Passed to repositories through the container, never stored globally.
    """

    def __init__(self, app: firebase_admin.App):
        self._app = app
        self._client = None

    @classmethod
    def initialize(cls, config: FirebaseConfig) -> "FirebaseConnection":
        if config.credentials_path and os.path.exists(config.credentials_path):
            cred = credentials.Certificate(config.credentials_path)
            logger.info("Firebase admin initialized using %s", config.credentials_path)
        else:
            if config.credentials_path:
                logger.warning(
                    "Firebase credentials not found at %r; falling back to application default credentials",
                    config.credentials_path,
                )
            cred = credentials.ApplicationDefault()

        options = {"projectId": config.project_id} if config.project_id else None
        try:
            app = firebase_admin.get_app(config.app_name)
        except ValueError:
            app = firebase_admin.initialize_app(cred, options, name=config.app_name)
        return cls(app)

    @property
    def app(self) -> firebase_admin.App:
        return self._app

    def firestore(self):
        if self._client is None:
            self._client = firestore.client(app=self._app)
        return self._client
