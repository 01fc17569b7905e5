from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Type

from pydantic import BaseModel


@dataclass(frozen=True)
class FlowSpec:
    name: str
    fn: Callable[[Any], Awaitable[BaseModel]]
    input_model: Type[BaseModel]
    output_model: Type[BaseModel]


FLOWS: dict[str, FlowSpec] = {}

def register(name: str, input_model: Type[BaseModel], output_model: Type[BaseModel]):
    def deco(fn: Callable[[Any], Awaitable[BaseModel]]):
        FLOWS[name] = FlowSpec(name=name, fn=fn, input_model=input_model, output_model=output_model)
        return fn
    return deco

def get_flow(name: str) -> FlowSpec:
    if name not in FLOWS:
        raise KeyError(f"Unknown flow: {name}. Known: {list(FLOWS.keys())}")
    return FLOWS[name]

def list_flows() -> list[str]:
    return sorted(FLOWS)
