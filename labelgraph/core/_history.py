import inspect
import json
import time
from datetime import datetime, timezone
from functools import wraps

import numpy as np
import polars as pl

from .edges import Edge
from .vertex import Vertex


def log_mutation(name=None):
    """
    Record successful calls of a graph mutator in the instance history.

    Applied at class level, so the event always lands in the history of the
    graph the method was called on. Calls that raise are not recorded.
    """
    def deco(fn):
        op = name or fn.__name__
        sig = inspect.signature(fn)
        @wraps(fn)
        def wrapper(self, *args, **kwargs):
            bound = sig.bind(self, *args, **kwargs)
            bound.apply_defaults()
            result = fn(self, *args, **kwargs)
            payload = dict(bound.arguments)
            payload.pop("self", None)
            payload["result"] = result
            self._log_event(op, **payload)
            return result
        return wrapper
    return deco


class HistoryMixin:
    """
    Append-only, in-memory mutation log for graph containers.

    Mutators decorated with ``log_mutation`` append one event per successful
    call; calls that raise are not recorded.
    """

    def _init_history(self, enabled: bool = True):
        self._history_enabled = bool(enabled)
        self._history = []           # list[dict]
        self._version = 0
        self._history_clock0 = time.perf_counter_ns()

    def _utcnow_iso(self) -> str:
        return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.
        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, Vertex):
            return x.label
        if isinstance(x, Edge):
            first, second = x.endpoints()
            arrow = "->" if x.is_directed else "--"
            text = f"{first} {arrow} {second}"
            if x.is_weighted:
                text += f" [{x.weight!r}]"
            return text
        if isinstance(x, (set, frozenset)):
            return sorted(str(self._jsonify(v)) for v in x)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        # NumPy scalars
        if isinstance(x, (np.generic,)):
            return x.item()
        t = type(x).__name__
        return f"<<{t}>>"

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        self._version += 1
        evt = {
            "version": self._version,
            "ts_utc": self._utcnow_iso(),                    # ISO-8601 with Z
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self._history.append(evt)

    def history(self, as_df: bool = False):
        """
        Return the append-only mutation history.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DF [DataFrame]; otherwise return a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event includes: 'version', 'ts_utc' (UTC ISO-8601), 'mono_ns'
            (monotonic nanoseconds since the graph was created), 'op', the call
            arguments and 'result'. Vertices are rendered as their labels and
            edges as ``"a -> b"`` / ``"a -- b"`` strings.
        """
        if not as_df:
            return list(self._history)
        if not self._history:
            return pl.DataFrame(schema={"version": pl.Int64, "ts_utc": pl.Utf8, "mono_ns": pl.Int64, "op": pl.Utf8})
        return pl.from_dicts(self._history, infer_schema_length=None)

    def export_history(self, path: str) -> int:
        """
        Write the mutation history to disk.

        Parameters
        ----------
        path : str
            Output path. Supported extensions: '.parquet', '.ndjson' (a.k.a. '.jsonl'),
            '.json', '.csv'. Unknown extensions default to Parquet by appending '.parquet'.

        Returns
        -------
        int
            Number of events written. Returns 0 if the history is empty.
        """
        if not self._history:
            return 0
        df = self.history(as_df=True)
        path = str(path)
        p = path.lower()
        if p.endswith(".parquet"):
            df.write_parquet(path)
        elif p.endswith(".ndjson") or p.endswith(".jsonl"):
            df.write_ndjson(path)
        elif p.endswith(".json"):
            with open(path, "w", encoding="utf-8") as f:
                json.dump(df.to_dicts(), f, ensure_ascii=False)
        elif p.endswith(".csv"):
            df.write_csv(path)
        else:
            df.write_parquet(path + ".parquet")
        return df.height

    def enable_history(self, flag: bool = True):
        """Enable (default) or pause in-memory mutation logging."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        """
        Clear the in-memory mutation log.

        Notes
        -----
        Version numbers keep increasing after a clear. Files previously
        exported are left alone.
        """
        self._history.clear()

    def mark(self, label: str):
        """
        Insert a manual marker event (``op='mark'``) into the history.

        Logging must be enabled for the marker to be recorded.
        """
        self._log_event("mark", label=label)
