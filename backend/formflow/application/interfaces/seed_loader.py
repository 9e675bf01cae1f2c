"""Abstract interface (port) for the one-shot bootstrap data source."""

from abc import ABC, abstractmethod

from formflow.application.schemas import SeedData


class SeedLoader(ABC):
    """Produces the initial store content. Implemented in the infrastructure layer."""

    @abstractmethod
    def load(self) -> SeedData:
        """Read and validate the seed. Raises SeedLoadError on failure."""
        ...
