"""Backend health reporting."""

from dataclasses import dataclass

from session_ledger.repositories.protocols import CacheRepository, TransactionRepository


@dataclass
class HealthStatus:
    http: bool = True
    db: bool = True
    redis: bool = True

    @property
    def healthy(self) -> bool:
        return self.db and self.redis

    def as_dict(self) -> dict[str, bool]:
        return {"http": self.http, "db": self.db, "redis": self.redis}


class HealthService:
    """Pings the transaction store and the summary cache."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        cache_repo: CacheRepository,
    ):
        self._transaction_repo = transaction_repo
        self._cache_repo = cache_repo

    def check(self) -> HealthStatus:
        return HealthStatus(
            db=self._transaction_repo.ping(),
            redis=self._cache_repo.ping(),
        )
