"""宠物存档：单个 JSON 文档，只有一个宠物槽位。"""
import json
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from pet_terminal.config import DATA_DIR, PET_DB_FILE, SAVE_VERSION
from pet_terminal.pet.models import PetRecord


class StoreSettings(BaseModel):
    created: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = SAVE_VERSION
    onboarded: bool = False


class SaveDocument(BaseModel):
    """pet.json 的完整内容。"""
    pet: Optional[PetRecord] = None
    settings: StoreSettings = Field(default_factory=StoreSettings)


class PetStore:
    """
    读：文件缺失、为空、不是合法 JSON 或结构不符时都视为“还没有宠物”。
    写：整份文档写入临时文件后替换，避免写到一半损坏存档。
    """

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir or DATA_DIR

    def _path(self) -> Path:
        return self.base_dir / PET_DB_FILE

    def _read(self) -> SaveDocument:
        path = self._path()
        if not path.exists():
            return SaveDocument()
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = f.read()
            if not raw.strip():
                return SaveDocument()
            return SaveDocument.model_validate(json.loads(raw))
        except (OSError, ValueError) as e:
            print(f"[宠物-存档] 存档无法读取，视为没有宠物: {e}", file=sys.stderr, flush=True)
            return SaveDocument()

    def _write(self, doc: SaveDocument) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        path = self._path()
        tmp = path.with_name(path.name + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(doc.model_dump_json(indent=2))
        os.replace(tmp, path)

    def has_pet(self) -> bool:
        return self._read().pet is not None

    def get_pet(self) -> Optional[PetRecord]:
        return self._read().pet

    def save_pet(self, record: PetRecord) -> PetRecord:
        """覆盖写入并记录保存时间，返回写入的记录。"""
        stamped = record.model_copy(update={"last_save_time": datetime.now(timezone.utc)})
        doc = self._read()
        doc.pet = stamped
        self._write(doc)
        return stamped

    def delete_pet(self) -> None:
        doc = self._read()
        doc.pet = None
        self._write(doc)

    def is_first_run(self) -> bool:
        return not self._read().settings.onboarded

    def mark_onboarded(self) -> None:
        doc = self._read()
        doc.settings.onboarded = True
        self._write(doc)
