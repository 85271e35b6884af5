from __future__ import annotations
from typing import Any
import click


class ConfigurableCommand(click.Command):
    """
    A `click.Command` whose parameter defaults can be supplied by a
    configuration file.  If ``allow_config`` is set, only the parameters named
    in it may be configured.
    """

    def __init__(self, allow_config: list[str] | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.allow_config = allow_config

    def is_configurable(self, paramname: str) -> bool:
        return self.allow_config is None or paramname in self.allow_config

    def process_config(self, cfg: dict[str, Any]) -> dict[str, Any]:
        out_cfg: dict[str, Any] = {}
        params = {p.name: p for p in self.params}
        for k, v in cfg.items():
            k = k.replace("-", "_")
            if k in params and self.is_configurable(k):
                p = params[k]
                if isinstance(p, click.Option) and p.is_flag:
                    # click only accepts actual booleans as defaults for flags
                    out_cfg[k] = bool(v)
                elif p.multiple:
                    out_cfg[k] = [str(v)]
                else:
                    out_cfg[k] = str(v)
        return out_cfg
