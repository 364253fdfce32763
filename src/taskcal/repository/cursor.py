# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskcal import configuration
from taskcal.model.cursor import CalendarMode, CursorPersistence, CursorState
from taskcal.time import date_from_str, date_to_str

logger = logging.getLogger(__name__)


class CursorRepository:
    def __init__(self) -> None:
        self._cursor: Optional[CursorState] = None
        self._loaded = False
        self.is_dirty = False

    @property
    def cursor(self) -> Optional[CursorState]:
        if not self._loaded:
            self.__load_data()
        return self._cursor

    def __load_data(self) -> None:
        self._loaded = True
        if not configuration.DATA_CURSOR_PATH.is_file():
            return

        try:
            raw_cursor = load(configuration.DATA_CURSOR_PATH.read_text(), Loader=Loader)
            if raw_cursor is not None:
                self._cursor = self.__convert_cursor_for_deserialization(raw_cursor)
        except (YAMLError, KeyError, TypeError, ValueError) as e:
            # Start from a fresh cursor
            logger.warning(
                "Ignoring unreadable cursor file %s: %s",
                configuration.DATA_CURSOR_PATH,
                e,
            )
            self._cursor = None

    def __save_data(self, cursor: CursorState) -> None:
        configuration.DATA_CURSOR_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_CURSOR_PATH.write_text(
            dump(self.__convert_cursor_for_serialization(cursor), Dumper=Dumper)
        )

    def flush(self) -> bool:
        if self._cursor is not None and self.is_dirty:
            self.__save_data(self._cursor)
            self.is_dirty = False
            return True
        return False

    def __convert_cursor_for_serialization(
        self, cursor: CursorState
    ) -> CursorPersistence:
        return {
            "mode": cursor["mode"].value,
            "reference_date": date_to_str(cursor["reference_date"]),
            "selected_task_id": cursor["selected_task_id"],
        }

    def __convert_cursor_for_deserialization(
        self, cursor: CursorPersistence
    ) -> CursorState:
        return {
            "mode": CalendarMode(cursor["mode"]),
            "reference_date": date_from_str(str(cursor["reference_date"])),
            "selected_task_id": cursor.get("selected_task_id"),
        }

    def get_cursor(self, today: pendulum.Date, default_mode: CalendarMode) -> CursorState:
        if self.cursor is None:
            return {
                "mode": default_mode,
                "reference_date": today,
                "selected_task_id": None,
            }
        return dict(self.cursor)  # type: ignore[return-value]

    def save_cursor(self, cursor: CursorState) -> None:
        self.is_dirty = True
        self._cursor = cursor


CURSOR_REPO = CursorRepository()
