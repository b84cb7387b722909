# File: vocalcoach/core/model_lifecycle/orchestrator.py

import gc
import torch
import logging
from threading import Lock
from .types import ModelType

logger = logging.getLogger(__name__)


class ModelOrchestrator:
    """
    Singleton Resource Manager.
    Keeps at most one local model (Whisper or Qwen) in VRAM, swapping on demand.
    """
    _instance = None
    _lock = Lock()

    def __new__(cls):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super(ModelOrchestrator, cls).__new__(cls)
                cls._instance._current_type = None
                cls._instance._loaded_model = None
        return cls._instance

    def request_model(self, model_type: ModelType, loader_func):
        """
        Returns the requested model, loading it (and evicting any other) if needed.

        Args:
            model_type: The enum identifier for the model.
            loader_func: Callable returning the loaded model. Only called on a miss.
        """
        with self._lock:
            if self._current_type == model_type and self._loaded_model is not None:
                return self._loaded_model

            if self._loaded_model is not None:
                self._unload()

            logger.info(f"ModelOrchestrator: Loading {model_type.value} into memory...")
            try:
                self._loaded_model = loader_func()
                self._current_type = model_type
                return self._loaded_model
            except Exception as e:
                logger.error(f"Failed to load {model_type.value}: {e}")
                raise

    def release(self):
        """Explicitly frees whatever model is currently loaded."""
        with self._lock:
            if self._loaded_model is not None:
                self._unload()

    def _unload(self):
        if self._current_type:
            logger.info(f"ModelOrchestrator: Unloading {self._current_type.value}...")

        del self._loaded_model
        self._loaded_model = None
        self._current_type = None

        gc.collect()
        if torch.cuda.is_available():
            torch.cuda.empty_cache()

    def get_current_model_type(self):
        """Helper for testing state."""
        return self._current_type
