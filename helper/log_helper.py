# helper/log_helper.py
from __future__ import annotations
import os, time, re, json
import logging
from contextlib import contextmanager
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# Logging: make module import-safe (handlers are attached by init_logger)
# -----------------------------------------------------------------------------
logger = logging.getLogger("blog_generator")
logger.setLevel(logging.INFO)
logger.addHandler(logging.NullHandler())

# --- config ---
_AI_DEBUG = os.getenv("AI_DEBUG", "0") == "1"
_MAX_LEN  = int(os.getenv("AI_LOG_MAXLEN", "1000"))  # truncate long payloads


def init_logger(level: int = logging.INFO) -> None:
    """
    Configure logging once. Safe to call multiple times.
    """
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        sh = logging.StreamHandler()
        sh.setLevel(level)
        sh.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(sh)
    if _AI_DEBUG:
        logger.setLevel(logging.DEBUG)


def get_logger(name: str) -> logging.Logger:
    """Child logger so every module shares the handlers set up by init_logger."""
    return logger.getChild(name)


# --- redaction (emails/phones) ---
_EMAIL_RE = re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.I)
_PHONE_RE = re.compile(r"\+?\d[\d\-\s().]{6,}\d")
def _redact(s: str) -> str:
    s = _EMAIL_RE.sub("[redacted_email]", s)
    s = _PHONE_RE.sub("[redacted_phone]", s)
    return s

def _to_json(o: Any) -> str:
    try:
        s = json.dumps(o, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        s = str(o)
    if len(s) > _MAX_LEN:
        s = s[:_MAX_LEN] + "…[truncated]"
    return _redact(s)

def _fmt_line(tag: str, payload: Any) -> str:
    return f"[AI-DBG] {tag} :: {_to_json(payload)}"

# --- public log fns ---
def ai_dbg(tag: str, payload: Any = "") -> None:
    """Debug log (emitted only if AI_DEBUG=1)."""
    if not _AI_DEBUG:
        return
    logger.debug(_fmt_line(tag, payload))

def ai_warn(tag: str, payload: Any = "") -> None:
    logger.warning(_fmt_line(tag, payload))

def ai_err(tag: str, payload: Any = "") -> None:
    logger.error(_fmt_line(tag, payload))

# --- timing spans ---
@contextmanager
def ai_span(tag: str, payload: Any = ""):
    """
    with ai_span("gateway.generate_meta", {"model": "..."}):
        ... code ...
    """
    start = time.perf_counter()
    ai_dbg(f"{tag}.start", payload)
    try:
        yield
        dur = (time.perf_counter() - start) * 1000.0
        ai_dbg(f"{tag}.end", {"ms": round(dur, 2)})
    except Exception as e:
        dur = (time.perf_counter() - start) * 1000.0
        ai_err(f"{tag}.error", {"ms": round(dur, 2), "exc": f"{e.__class__.__name__}: {e}"})
        raise

# --- helpers for HTTP logs (request/response) ---
def log_http_request(tag: str, url: str, method: str = "GET", body: Any = None):
    ai_dbg(f"{tag}.request", {"method": method, "url": url, "body": body})

def log_http_response(tag: str, status: int, text: Optional[str] = None):
    payload: Dict[str, Any] = {"status": status}
    if text:
        payload["text"] = text[:_MAX_LEN] + ("…[truncated]" if len(text) > _MAX_LEN else "")
    ai_dbg(f"{tag}.response", payload)
