"""
barcodegen
==========

Кодирование линейных штрихкодов в последовательность модулей и их
отрисовка в текст, JSON, SVG и растровые изображения.

Этот пакет предоставляет:
    - EAN-13, UPC-A, Bookland, JAN, EAN-8 и дополнения EAN-2/EAN-5
    - Code 39 (с контрольным символом и без), Code 93, Code 11, Codabar
    - Чередующийся и стандартный 2 of 5
    - Code 128 с явным выбором наборов символов A/B/C
    - Генераторы ASCII, JSON, SVG и изображений (Pillow)

Пример базового использования:
    >>> from barcodegen import EAN13, ImageGenerator, get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> barcode = EAN13("750103131130")
    >>> modules = barcode.encode()
    >>> png = ImageGenerator(height=60, xdim=2).generate(modules)
    >>> logger.info(f"PNG: {len(png)} байт, {len(modules)} модулей")

Пример через фасад:
    >>> from barcodegen import BarcodeGenerator, Symbology
    >>> gen = BarcodeGenerator(Symbology.CODE39, "TEST8052", {"checksum": True})
    >>> svg = gen.render_svg()

Переменные окружения:
    BARCODEGEN_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL (по умолчанию INFO)
    BARCODEGEN_LOG_FILE: путь к файлу журнала (ротируемый, опционально)
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "barcodegen Development Team"
__description__ = "Linear barcode encoders with ASCII, JSON, SVG and raster renderers"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"barcodegen требует Python 3.11 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================

_PACKAGE_LOGGER = "barcodegen"
_LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
_LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
_LOG_FILE_BACKUPS = 3


def _parse_level(name: Any) -> Optional[int]:
    """Имя уровня ('debug', 'WARNING', ...) в число; None для неизвестного."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else None


def _setup_logging() -> None:
    """
    Подключить обработчики к логгеру 'barcodegen' (один раз за процесс).

    stderr получает WARNING и выше; BARCODEGEN_LOG_FILE добавляет
    ротируемый файл с уровнем пакета. Уровень пакета берётся из
    BARCODEGEN_LOG_LEVEL, неизвестное имя означает INFO.
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    if package_logger.handlers:
        return

    level = _parse_level(os.environ.get("BARCODEGEN_LOG_LEVEL", "INFO")) or logging.INFO
    package_logger.setLevel(level)
    package_logger.propagate = False

    formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATEFMT)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(formatter)
    package_logger.addHandler(stderr_handler)

    log_file = os.environ.get("BARCODEGEN_LOG_FILE")
    if not log_file:
        return
    try:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            filename=path,
            maxBytes=_LOG_FILE_MAX_BYTES,
            backupCount=_LOG_FILE_BACKUPS,
            encoding="utf-8",
        )
    except OSError as e:
        package_logger.warning(f"Журнал {log_file} недоступен ({e}); пишем только в stderr")
        return
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    package_logger.addHandler(file_handler)


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён 'barcodegen.<module_name>'.

    Пример:
        >>> get_logger("my_plugin").name
        'barcodegen.my_plugin'
        >>> get_logger("barcodegen.sym.ean").name
        'barcodegen.sym.ean'
    """
    if module_name == _PACKAGE_LOGGER or module_name.startswith(f"{_PACKAGE_LOGGER}."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{_PACKAGE_LOGGER}.main")
    return logging.getLogger(f"{_PACKAGE_LOGGER}.{module_name.lstrip('.')}")


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "height": 80,
    "xdim": 1,
    "foreground": [0, 0, 0, 255],
    "background": [255, 255, 255, 255],
    "image_format": "PNG",
    "rotation": 0,
    "svg_xmlns": True,
}

DEFAULT_CONFIG_FILE = "barcodegen.json"


def _read_config_file(path: Path) -> Dict[str, Any]:
    """
    Прочитать JSON-объект из файла.

    Raises:
        OSError: файл не читается.
        ValueError: недопустимый JSON или корень не объект.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"ожидался JSON-объект, получен {type(data).__name__}")
    return data


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Собрать конфигурацию рендеринга: значения по умолчанию плюс JSON-файл.

    Ключи (см. ``_DEFAULT_CONFIG``): log_level, height, xdim, foreground,
    background, image_format, rotation, svg_xmlns.

    Файл ищется по ``config_path``, иначе ``barcodegen.json`` в текущем
    каталоге. Отсутствующий файл не ошибка. Нечитаемый или некорректный
    файл, неизвестные ключи и значения не того типа дают предупреждение в
    лог; такие значения пропускаются, остальные применяются.
    """
    logger = get_logger(__name__)
    path = Path(DEFAULT_CONFIG_FILE) if config_path is None else Path(config_path)
    config = dict(_DEFAULT_CONFIG)

    if not path.exists():
        logger.debug(f"{path} не найден, конфигурация по умолчанию")
        return config

    try:
        user_config = _read_config_file(path)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError является ValueError
        logger.warning(f"Конфигурация {path} проигнорирована: {e}")
        return config

    unknown = sorted(set(user_config) - set(_DEFAULT_CONFIG))
    if unknown:
        logger.warning(f"Неизвестные ключи конфигурации в {path}: {', '.join(unknown)}")

    for key, default in _DEFAULT_CONFIG.items():
        if key not in user_config:
            continue
        value = user_config[key]
        # bool является int, поэтому сравниваем типы точно
        if type(value) is not type(default):
            logger.warning(
                f"Ключ {key!r} в {path}: ожидался {type(default).__name__}, "
                f"получен {type(value).__name__}; оставлено {default!r}"
            )
            continue
        config[key] = value

    logger.info(f"Конфигурация загружена из {path}")
    logger.debug(f"Конфигурация: {config}")
    return config


def get_config() -> Dict[str, Any]:
    """Активная конфигурация пакета (загружается при импорте)."""
    return _config


def reload_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Перечитать конфигурацию и сделать её активной."""
    global _config
    _config = load_config(config_path)
    return _config


# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()

_logger = get_logger(__name__)
_logger.debug(f"barcodegen v{__version__} инициализируется...")

_config: Dict[str, Any] = load_config()

# BARCODEGEN_LOG_LEVEL важнее файла конфигурации
if "BARCODEGEN_LOG_LEVEL" not in os.environ:
    _level = _parse_level(_config["log_level"])
    if _level is None:
        _logger.warning(f"Недопустимый log_level в конфигурации: {_config['log_level']!r}")
    else:
        logging.getLogger(_PACKAGE_LOGGER).setLevel(_level)

# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

from barcodegen.errors import (  # noqa: E402
    BarcodeError,
    CharacterError,
    ChecksumError,
    ErrorKind,
    GenerateError,
    LengthError,
)
from barcodegen.model.enums import ImageFormat, Rotation, Symbology  # noqa: E402
from barcodegen.sym import (  # noqa: E402
    EAN2,
    EAN5,
    EAN8,
    EAN13,
    ITF,
    JAN,
    STF,
    UPCA,
    USD8,
    Barcode,
    Bookland,
    Codabar,
    Code11,
    Code39,
    Code93,
    Code128,
    ToF,
    ean_supplement,
)
from barcodegen.generators import (  # noqa: E402
    ASCIIGenerator,
    Color,
    ImageGenerator,
    JSONGenerator,
    SVGGenerator,
)
from barcodegen.barcode_generator import BarcodeGenerator, BarcodeOptions  # noqa: E402

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    "get_config",
    "reload_config",
    # Ошибки
    "ErrorKind",
    "BarcodeError",
    "CharacterError",
    "LengthError",
    "ChecksumError",
    "GenerateError",
    # Перечисления
    "Symbology",
    "Rotation",
    "ImageFormat",
    # Символики
    "Barcode",
    "EAN13",
    "Bookland",
    "JAN",
    "UPCA",
    "EAN8",
    "EAN2",
    "EAN5",
    "ean_supplement",
    "Code39",
    "Code93",
    "Code11",
    "USD8",
    "Codabar",
    "ToF",
    "ITF",
    "STF",
    "Code128",
    # Генераторы
    "ASCIIGenerator",
    "JSONGenerator",
    "SVGGenerator",
    "ImageGenerator",
    "Color",
    # Фасад
    "BarcodeGenerator",
    "BarcodeOptions",
]

_logger.debug(f"barcodegen v{__version__} инициализирован")
