"""
Persistence Adapters

Key-value storage of saved puzzle progress, keyed by puzzle number.

Saves are partial: only the fields present in the saved record are written
and every other field of the stored record is kept.
"""

import json
import os
import threading
from typing import Any, Dict, Optional

from pymongo.errors import PyMongoError

from ..models.errors import PersistenceReadError
from ..models.game import PersistedPuzzleState

DEFAULT_NAMESPACE = "daily_wordle"


def _merge(existing: Dict[str, Any], partial: PersistedPuzzleState) -> Dict[str, Any]:
    merged = dict(existing)
    merged.update(partial.to_dict())
    return merged


class PersistenceAdapter:
    """Interface shared by every storage backend."""
    
    def load(self) -> Dict[int, PersistedPuzzleState]:
        raise NotImplementedError
    
    def save(self, partial: PersistedPuzzleState, puzzle_id: int) -> None:
        raise NotImplementedError
    
    def prune(self, active_puzzle_id: int) -> None:
        raise NotImplementedError
    
    def load_puzzle(self, puzzle_id: int) -> Optional[PersistedPuzzleState]:
        return self.load().get(puzzle_id)


def _decode_records(raw: Any) -> Dict[int, PersistedPuzzleState]:
    if not isinstance(raw, dict):
        raise PersistenceReadError("Saved games must be an object keyed by puzzle number")
    records = {}
    for key, value in raw.items():
        try:
            puzzle_id = int(key)
        except (TypeError, ValueError) as e:
            raise PersistenceReadError(f"Invalid puzzle number key: {key!r}") from e
        records[puzzle_id] = PersistedPuzzleState.from_dict(value)
    return records


class InMemoryPersistenceAdapter(PersistenceAdapter):
    """Dictionary-backed store; records are kept in their JSON form."""
    
    def __init__(self, namespace: str = DEFAULT_NAMESPACE, store: Optional[Dict[str, Dict]] = None):
        self.namespace = namespace
        self.store = store if store is not None else {}
        self.store.setdefault(namespace, {})
    
    @property
    def _records(self) -> Dict[str, Dict[str, Any]]:
        return self.store[self.namespace]
    
    def load(self) -> Dict[int, PersistedPuzzleState]:
        return _decode_records(self._records)
    
    def save(self, partial: PersistedPuzzleState, puzzle_id: int) -> None:
        key = str(puzzle_id)
        self._records[key] = _merge(self._records.get(key, {}), partial)
    
    def prune(self, active_puzzle_id: int) -> None:
        for key in [k for k in self._records if k != str(active_puzzle_id)]:
            del self._records[key]


class JsonFilePersistenceAdapter(PersistenceAdapter):
    """
    Single JSON file holding one object per namespace, each mapping puzzle
    number to its saved record.
    
    Several namespaces (one per player) can share a file; a class-level lock
    serializes the read-modify-write cycle.
    """
    
    _file_lock = threading.Lock()
    
    def __init__(self, path: str, namespace: str = DEFAULT_NAMESPACE):
        self.path = path
        self.namespace = namespace
    
    def _read_file(self) -> Dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise PersistenceReadError(f"Could not read saved games from {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceReadError(f"Saved games file {self.path} must contain an object")
        return data
    
    def _write_file(self, data: Dict[str, Any]) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump(data, f, ensure_ascii=False)
        os.replace(tmp_path, self.path)
    
    def _read_for_update(self) -> Dict[str, Any]:
        # An unreadable file is replaced rather than blocking new saves
        try:
            return self._read_file()
        except PersistenceReadError:
            return {}
    
    def load(self) -> Dict[int, PersistedPuzzleState]:
        with self._file_lock:
            data = self._read_file()
        return _decode_records(data.get(self.namespace, {}))
    
    def save(self, partial: PersistedPuzzleState, puzzle_id: int) -> None:
        with self._file_lock:
            data = self._read_for_update()
            records = data.get(self.namespace)
            if not isinstance(records, dict):
                records = {}
            key = str(puzzle_id)
            records[key] = _merge(records.get(key, {}), partial)
            data[self.namespace] = records
            self._write_file(data)
    
    def prune(self, active_puzzle_id: int) -> None:
        with self._file_lock:
            data = self._read_for_update()
            records = data.get(self.namespace)
            if not isinstance(records, dict):
                return
            active_key = str(active_puzzle_id)
            data[self.namespace] = {k: v for k, v in records.items() if k == active_key}
            self._write_file(data)


class MongoPersistenceAdapter(PersistenceAdapter):
    """
    MongoDB-backed store: one document per (namespace, puzzle_id).
    
    Merge semantics come from `$set` upserts, so fields not present in a
    partial save are never touched.
    """
    
    def __init__(self, collection, namespace: str = DEFAULT_NAMESPACE):
        self.collection = collection
        self.namespace = namespace
    
    def load(self) -> Dict[int, PersistedPuzzleState]:
        try:
            documents = list(self.collection.find({'namespace': self.namespace}))
        except PyMongoError as e:
            raise PersistenceReadError(f"Could not read saved games: {e}") from e
        records = {}
        for document in documents:
            fields = {k: v for k, v in document.items() if k not in ('_id', 'namespace', 'puzzle_id')}
            records[int(document['puzzle_id'])] = PersistedPuzzleState.from_dict(fields)
        return records
    
    def save(self, partial: PersistedPuzzleState, puzzle_id: int) -> None:
        fields = partial.to_dict()
        if not fields:
            return
        self.collection.update_one(
            {'namespace': self.namespace, 'puzzle_id': puzzle_id},
            {'$set': fields},
            upsert=True,
        )
    
    def prune(self, active_puzzle_id: int) -> None:
        self.collection.delete_many({'namespace': self.namespace, 'puzzle_id': {'$ne': active_puzzle_id}})


def connect_mongo_collection(mongo_uri: str, database: str = 'daily_wordle', collection: str = 'puzzle_states'):
    """Open the saved-games collection and make sure its index exists."""
    from pymongo.mongo_client import MongoClient
    from pymongo.server_api import ServerApi
    
    client = MongoClient(mongo_uri, server_api=ServerApi('1'))
    client.admin.command('ping')
    puzzle_states = client[database][collection]
    puzzle_states.create_index([('namespace', 1), ('puzzle_id', 1)], unique=True)
    return puzzle_states
