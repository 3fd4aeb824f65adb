import sys
import json
import traceback

from pathlib import Path
from typing import Dict, Any, Sequence, Union

from arffkit.exceptions import ArffException, ArffExit
from arffkit.registry import ArffRegistry
from arffkit.context.loggers import Logger, DecoratedLogger, ExceptLog, StampLog

import arffkit.register

def arff_exit(message:str):
    raise ArffExit(message) from None

class ArffContext_meta(type):
    """Global settings accessible to all arffkit classes.

    Settings can either be set directly or set in a .arffkit json file. Files
    are read from each search path in order and later files take precedence.
    """

    _logger         = None
    _comment_marker = None
    _strict         = None
    _search_paths   = [Path.home() , Path.cwd(), Path(sys.path[0]) ]
    _config_backing = None

    def _load_file_configs(cls) -> Dict[str,Any]:
        config = {}

        for search_path in cls.search_paths:

            potential_config = search_path / ".arffkit"

            if potential_config.is_file() and potential_config.read_text().strip() != "":
                try:
                    file_config = json.loads(potential_config.read_text())

                    if not isinstance(file_config, dict):
                        raise ArffException(f"Expecting a JSON object (i.e., {{}}).")

                    cls._resolve_and_expand_paths(file_config, str(search_path))

                    config.update(file_config)

                except Exception as e:
                    raise ArffException(f"{str(e).strip('.')} in {potential_config}.")

        return config

    def _resolve_and_expand_paths(cls, config_dict: dict, current_dir:str):
        for key,item in config_dict.items():
            if isinstance(item, dict):
                cls._resolve_and_expand_paths(item, current_dir)

            if isinstance(item,str) and item.strip().startswith("~"):
                config_dict[key] = str(Path(item).expanduser().resolve())

            if isinstance(item,str) and (item.strip().startswith("../") or item.strip().startswith("./")):
                config_dict[key] = str(Path(current_dir,item).resolve())

    @property
    def _config(cls) -> Dict[str,Any]:

        if cls._config_backing is None:
            try:
                raw_config: Dict[str,Any] = {
                    "logger"        : "IndentLogger",
                    "timestamps"    : False,
                    "comment_marker": "%",
                    "strict"        : True
                }

                raw_config.update(cls._load_file_configs())

                if not isinstance(raw_config["comment_marker"], str):
                    raise ArffException("The comment_marker setting must be a string.")

                logger = ArffRegistry.construct(raw_config["logger"])

                if not isinstance(logger, Logger):
                    raise ArffException(f"The logger setting {raw_config['logger']} did not make a Logger.")

                post_decorators = [StampLog()] if raw_config["timestamps"] else []

                cls._config_backing = {
                    'logger'        : DecoratedLogger([ExceptLog()], logger, post_decorators),
                    'comment_marker': raw_config['comment_marker'],
                    'strict'        : bool(raw_config['strict'])
                }

            except ArffException as e:
                messages = [
                    '',
                    "ERROR: An error occured while initializing ArffContext. Execution is unable to continue. Please see below for details:",
                    f"    > {e}",
                    ''
                ]
                arff_exit('\n'.join(messages))

            except Exception as e:
                messages = [
                    '',
                    "ERROR: An error occured while initializing ArffContext. Execution is unable to continue. Please see below for details:",
                    ''.join(traceback.format_tb(e.__traceback__)),
                    ''.join(traceback.TracebackException.from_exception(e).format_exception_only())
                ]
                arff_exit('\n'.join(messages))

        return cls._config_backing

    @property
    def logger(cls) -> Logger:
        """Global logging strategy."""
        cls._logger = cls._logger if cls._logger else cls._config['logger']
        return cls._logger

    @logger.setter
    def logger(cls, value: Logger) -> None:
        cls._logger = value

    @property
    def comment_marker(cls) -> str:
        """The default comment marker for ARFF readers."""
        cls._comment_marker = cls._comment_marker if cls._comment_marker is not None else cls._config['comment_marker']
        return cls._comment_marker

    @comment_marker.setter
    def comment_marker(cls, value: str) -> None:
        cls._comment_marker = value

    @property
    def strict(cls) -> bool:
        """The default for whether ARFF readers require one field per attribute."""
        cls._strict = cls._strict if cls._strict is not None else cls._config['strict']
        return cls._strict

    @strict.setter
    def strict(cls, value: bool) -> None:
        cls._strict = value

    @property
    def search_paths(cls) -> Sequence[Path]:
        """The sequence of search paths for .arffkit configuration files."""
        return cls._search_paths

    @search_paths.setter
    def search_paths(cls, value:Sequence[Union[str,Path]]) -> None:
        cls._search_paths = [ Path(path) if isinstance(path,str) else path for path in value  ]

    def reset(cls) -> None:
        """Forget all settings so they are reloaded from the search paths on next use."""
        cls._logger         = None
        cls._comment_marker = None
        cls._strict         = None
        cls._config_backing = None

class ArffContext(metaclass=ArffContext_meta):
    """To support class properties we implement our properties directly on a meta class.
       Properties are loaded lazily which moves configuration errors to first use instead
       of import time.
    """
    pass
