"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from gridforge.codegen import GeneratorSet
from gridforge.handlers import DesignHandler
from gridforge.importer import ImportDispatcher
from .config import Settings, get_settings


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide settings (explicit, or the cached environment settings)."""
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_generators(self, settings: Settings) -> GeneratorSet:
        """Provide one generator per dialect."""
        return GeneratorSet(include_comments=settings.emit_comments)

    @singleton
    @provider
    def provide_dispatcher(self, settings: Settings) -> ImportDispatcher:
        """Provide import dispatcher."""
        return ImportDispatcher(settings)

    @singleton
    @provider
    def provide_design_handler(
        self, dispatcher: ImportDispatcher, generators: GeneratorSet, settings: Settings
    ) -> DesignHandler:
        """Provide design handler with a fresh session document."""
        return DesignHandler(dispatcher=dispatcher, generators=generators, settings=settings)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings)])
