# storefront/repos/slot_repo.py
from typing import Dict, Optional

import redis
from redis.exceptions import RedisError
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from storefront.data.database import Base, make_engine, make_session_factory
from storefront.data.models.slot import SlotModel
from storefront.utils.logging import get_logger
from storefront.utils.retry import redis_retry, sql_retry
from storefront.utils.settings import DATABASE_URL, REDIS_URL

logger = get_logger(__name__)


class SlotStorageError(RuntimeError):
    """Slot store could not be read or written."""


class SqlSlotRepo:
    """
    Key-value slots in a single SQL table.
    put_many writes every slot in one transaction.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @classmethod
    def from_url(cls, url: str = DATABASE_URL) -> "SqlSlotRepo":
        engine = make_engine(url)
        Base.metadata.create_all(bind=engine)
        logger.info(f"SQL slot store ready ({engine.url.render_as_string(hide_password=True)})")
        return cls(make_session_factory(engine))

    def get(self, key: str) -> Optional[str]:
        try:
            return self._get(key)
        except SQLAlchemyError as e:
            raise SlotStorageError(f"Cannot read slot {key}: {e}") from e

    def put_many(self, payloads: Dict[str, str]) -> None:
        try:
            self._put_many(payloads)
        except SQLAlchemyError as e:
            raise SlotStorageError(f"Cannot write slots {sorted(payloads)}: {e}") from e

    @sql_retry()
    def _get(self, key: str) -> Optional[str]:
        with self.session_factory() as db:
            return db.execute(
                select(SlotModel.payload).where(SlotModel.name == key)
            ).scalar_one_or_none()

    @sql_retry()
    def _put_many(self, payloads: Dict[str, str]) -> None:
        with self.session_factory() as db:
            with db.begin():
                for key, payload in payloads.items():
                    row = db.get(SlotModel, key)
                    if row:
                        row.payload = payload
                    else:
                        db.add(SlotModel(name=key, payload=payload))


class RedisSlotRepo:
    """
    Key-value slots as plain redis strings.
    put_many goes through a MULTI/EXEC pipeline so either all keys change or none.
    """

    def __init__(self, client: redis.Redis):
        self.redis = client

    @classmethod
    def from_url(cls, url: str = REDIS_URL) -> "RedisSlotRepo":
        return cls(redis.Redis.from_url(url, decode_responses=True))

    def get(self, key: str) -> Optional[str]:
        try:
            return self._get(key)
        except (RedisError, UnicodeDecodeError) as e:
            raise SlotStorageError(f"Cannot read slot {key}: {e}") from e

    def put_many(self, payloads: Dict[str, str]) -> None:
        try:
            self._put_many(payloads)
        except RedisError as e:
            raise SlotStorageError(f"Cannot write slots {sorted(payloads)}: {e}") from e

    @redis_retry()
    def _get(self, key: str) -> Optional[str]:
        value = self.redis.get(key)
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    @redis_retry()
    def _put_many(self, payloads: Dict[str, str]) -> None:
        pipe = self.redis.pipeline(transaction=True)
        for key, payload in payloads.items():
            pipe.set(key, payload)
        pipe.execute()
