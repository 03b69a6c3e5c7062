# core/registry.py
from __future__ import annotations
import importlib
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from core.errors import ConfigurationError

MODEL_MODULES: List[str] = [
    "plugins.counters.samsung_m4080fx",
    "plugins.counters.hp_laser_408",
    "plugins.counters.hp_e57540dn",
    "plugins.counters.hp_e52645dn",
]


@dataclass(frozen=True)
class ModelDefinition:
    """
    Everything that differs between supported printer models.

    url: counters page, `{ip}` is substituted
    fetch: "page" for the rendered DOM, "source" for the raw body as a line table
    identity: object with extract(Document) -> str
    counters: object with extract(Document) -> rows and label_row()
    """
    name: str
    url: str
    identity: Any
    counters: Any
    fetch: str = "page"
    ignore_https_errors: bool = False
    wait_until: str = "load"
    section_header: str = "Counter Total"
    sheet_title: str = "Data"
    write_via_buffer: bool = False

    def url_for(self, ip: str) -> str:
        return self.url.format(ip=ip)


def load_model(module_name: str) -> ModelDefinition:
    mod = importlib.import_module(module_name)
    model = getattr(mod, "MODEL", None)
    if not isinstance(model, ModelDefinition):
        raise ConfigurationError(f"{module_name} does not define MODEL")
    return model


def build_registry(models: Optional[Iterable[ModelDefinition]] = None) -> Dict[str, ModelDefinition]:
    if models is None:
        models = [load_model(m) for m in MODEL_MODULES]
    registry: Dict[str, ModelDefinition] = {}
    for model in models:
        if model.name in registry:
            raise ConfigurationError(f"duplicate printer model: {model.name}")
        registry[model.name] = model
    return registry


def supported_models(registry: Dict[str, ModelDefinition]) -> List[str]:
    return sorted(registry)
