"""Registry of named key actions and the per-keymap bindings that trigger them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional

from vim_playground.runtime import telemetry

from .models import ActionRef, Binding


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int
    modes: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """A binding claims a key that another binding already owns in that keymap."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        owners = ", ".join(repr(other.id) for other in self.conflicts)
        super().__init__(
            f"'{binding.key_signature}' in keymap '{binding.mode}' is already bound"
            f" by {owners} (while registering '{binding.id}')"
        )


class KeymapRegistry:
    """Actions by id, plus one ``token -> Binding`` table per keymap.

    ``revision`` increases on every binding change so hosts can tell when a
    cached key hint list is stale.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._logger_name = logger_name
        self._actions: Dict[str, ActionRef] = {}
        self._keymaps: Dict[str, Dict[str, Binding]] = {}
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        action = self._actions.get(action_id)
        if action is None:
            raise KeyError(f"Action '{action_id}' is not registered")
        return action

    def get_binding(self, binding_id: str) -> Binding:
        for binding in self.iter_bindings():
            if binding.id == binding_id:
                return binding
        raise KeyError(f"Binding '{binding_id}' is not registered")

    def lookup(self, mode: str, token: str) -> Optional[Binding]:
        return self._keymaps.get(mode, {}).get(token)

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if action.id in self._actions and not replace:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        self._log("action.register", action_id=action.id)
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        if binding.action_id not in self._actions:
            raise KeyError(
                f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
            )

        previous = self._find(binding.id)
        conflicts = self.detect_conflicts(binding)
        if not replace:
            if conflicts:
                self._log(
                    "binding.conflict",
                    level="warning",
                    binding_id=binding.id,
                    conflicts=[other.id for other in conflicts],
                )
                raise KeymapConflictError(binding, conflicts)
            if previous is not None:
                raise ValueError(f"Binding id '{binding.id}' already registered")

        for stale in (*conflicts, *((previous,) if previous else ())):
            self._drop(stale)
        self._keymaps.setdefault(binding.mode, {})[binding.key_signature] = binding
        self._revision += 1
        self._log(
            "binding.register",
            binding_id=binding.id,
            mode=binding.mode,
            key=binding.key_signature,
        )
        return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._find(binding_id)
        if binding is None:
            return None
        self._drop(binding)
        self._revision += 1
        self._log("binding.unregister", binding_id=binding_id)
        return binding

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is not None:
            yield from self._keymaps.get(mode, {}).values()
            return
        for keymap in self._keymaps.values():
            yield from keymap.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=sum(len(keymap) for keymap in self._keymaps.values()),
            modes=tuple(sorted(self._keymaps)),
        )

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        owner = self.lookup(binding.mode, binding.key_signature)
        if owner is None or owner.id == binding.id:
            return []
        return [owner]

    def _find(self, binding_id: str) -> Optional[Binding]:
        return next(
            (binding for binding in self.iter_bindings() if binding.id == binding_id),
            None,
        )

    def _drop(self, binding: Binding) -> None:
        keymap = self._keymaps.get(binding.mode, {})
        if keymap.get(binding.key_signature) is binding:
            del keymap[binding.key_signature]
        if not keymap:
            self._keymaps.pop(binding.mode, None)

    def _log(self, event: str, *, level: str = "debug", **data: object) -> None:
        telemetry.record_event(
            f"keymaps.{event}", level=level, data=data, logger_name=self._logger_name
        )


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]
