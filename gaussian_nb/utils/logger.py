#!filepath: gaussian_nb/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, Optional

_PACKAGE = "gaussian_nb"


class Logging:
    """
    Library logger
    ---------------------------------------
    - owns exactly one loguru sink (stderr, or a rotating file when log_dir
      is set) filtered to gaussian_nb records
    - reconfiguring swaps only that sink; sinks added by the host
      application are never touched
    - function-level catch decorator
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
        configure: bool = True,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self._handler_id: Optional[int] = None

        if configure:
            self._configure()

    @classmethod
    def from_config(cls, cfg) -> "Logging":
        return cls(
            log_dir=cfg.dir,
            rotation=cfg.rotation,
            retention=cfg.retention,
            log_level=cfg.level,
        )

    def _configure(self) -> None:
        """
        Swap this instance's sink for the one described by its fields and
        enable gaussian_nb records.
        """
        self.close()

        if self.log_dir is None:
            self._handler_id = logger.add(
                sink=sys.stderr,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                filter=_PACKAGE,
            )
        else:
            os.makedirs(self.log_dir, exist_ok=True)
            self._handler_id = logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                filter=_PACKAGE,
                enqueue=True,  # multi-process safe
                backtrace=True,
                diagnose=True,
            )

        logger.enable(_PACKAGE)
        logger.debug("[Logging] logger configured level={}", self.level)

    def close(self) -> None:
        """
        Remove this instance's sink, if any.
        """
        if self._handler_id is None:
            return
        handler_id, self._handler_id = self._handler_id, None
        try:
            logger.remove(handler_id)
        except ValueError:
            # host already dropped it via logger.remove()
            logger.debug("[Logging] sink {} was already removed", handler_id)

    # ----------- log methods -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- decorators ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:
        """
        Log (with traceback) and re-raise anything the wrapped call raises.
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.debug(
                        f"[CALL] {func.__name__} kwargs={json.dumps(kwargs, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.debug(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


def init_logging(cfg) -> Logging:
    """
    Reconfigure the global `logs` sink from a LogConfig and enable
    gaussian_nb records.

    The instance is updated in place so every `from gaussian_nb import logs`
    keeps pointing at the live logger.
    """
    logs.log_dir = cfg.dir
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level
    logs._configure()
    return logs


# importing the library adds no sink and stays silent until init_logging()
logs = Logging(configure=False)
logger.disable(_PACKAGE)
