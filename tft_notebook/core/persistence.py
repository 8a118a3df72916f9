"""Local persistence of the Build State Store."""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from tft_notebook.errors import PersistenceError
from .build_state import BuildStateStore, ChampionState, parse_states

logger = logging.getLogger(__name__)


class StateFile:
    """
    JSON file holding the saved builds of every champion.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> Optional[list[ChampionState]]:
        """
        Read the saved builds.

        Returns:
            Saved champion states, or None when there is no usable file.
            A missing, unreadable or malformed file is not an error.
        """
        if not self.path.exists():
            logger.info(f"No saved builds at {self.path}")
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                records = json.load(f)
            states = parse_states(records)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable build state {self.path}: {e}")
            return None

        logger.info(f"Loaded {len(states)} saved builds from {self.path}")
        return states

    def save(self, store: BuildStateStore) -> Path:
        """
        Overwrite the file with the whole store.

        Returns:
            The path written.

        Raises:
            PersistenceError: If the file cannot be written.
        """
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # The old file stays intact until the new one is complete.
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_path = Path(f.name)
                json.dump(store.serialize(), f)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise PersistenceError(f"Could not save builds to {self.path}: {e}") from e

        logger.info(f"Saved {len(store)} builds to {self.path}")
        return self.path
