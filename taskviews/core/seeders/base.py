"""Base seeder class."""

from abc import ABC, abstractmethod

from sqlalchemy.orm import Session


class Seeder(ABC):
    """Base class for database seeders.

    Seeders must be idempotent: running one twice leaves the same data.
    """

    @abstractmethod
    def run(self, db: Session) -> None:
        """Run the seeder.

        Args:
            db: Database session
        """
        pass

    def is_enabled(self) -> bool:
        """Whether the module this seeder fills is enabled."""
        return True

    def get_name(self) -> str:
        """Get seeder class name."""
        return self.__class__.__name__
