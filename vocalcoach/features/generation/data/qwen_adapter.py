import logging
import torch
from typing import Optional
from transformers import AutoModelForCausalLM, AutoTokenizer, BitsAndBytesConfig
from vocalcoach.core.config.settings import settings
from vocalcoach.core.model_lifecycle.orchestrator import ModelOrchestrator
from vocalcoach.core.model_lifecycle.types import ModelType
from ..domain.errors import GenerationError, EmptyResponseError, UnsupportedCapabilityError
from ..domain.interfaces import ITextGenerator

logger = logging.getLogger(__name__)


class QwenTextGenerator(ITextGenerator):
    """Local prompt-only backend running Qwen 2.5 Instruct in 4-bit."""

    def __init__(self, model_path: str = settings.QWEN_MODEL_PATH, system_instruction: Optional[str] = None):
        self.model_path = model_path
        self.system_instruction = system_instruction or "You are a helpful assistant."
        self.orchestrator = ModelOrchestrator()
        self.device = "cuda" if torch.cuda.is_available() else "cpu"

    def _load(self):
        logger.info(f"Loading Qwen from {self.model_path} in 4-bit...")

        bnb_config = BitsAndBytesConfig(
            load_in_4bit=True,
            bnb_4bit_use_double_quant=True,
            bnb_4bit_quant_type="nf4",
            bnb_4bit_compute_dtype=torch.bfloat16
        )

        tokenizer = AutoTokenizer.from_pretrained(self.model_path)
        model = AutoModelForCausalLM.from_pretrained(
            self.model_path,
            quantization_config=bnb_config,
            device_map="auto",
            trust_remote_code=True
        )
        return model, tokenizer

    def generate_from_audio(self, data: bytes, mime_type: str) -> str:
        raise UnsupportedCapabilityError("Qwen backend only accepts text prompts")

    def generate_from_prompt(self, prompt: str) -> str:
        model, tokenizer = self.orchestrator.request_model(ModelType.QWEN, self._load)
        chat = self._build_chat(prompt)

        try:
            inputs = tokenizer([chat], return_tensors="pt").to(self.device)
            generated_ids = model.generate(
                **inputs,
                max_new_tokens=1024,
                do_sample=False
            )
            response = tokenizer.batch_decode(
                generated_ids[:, inputs.input_ids.shape[1]:],
                skip_special_tokens=True
            )[0]
        except Exception as e:
            raise GenerationError(f"Qwen inference failed: {e}") from e

        if not response.strip():
            raise EmptyResponseError("Qwen returned an empty completion")
        return response

    def _build_chat(self, prompt: str) -> str:
        return f"""<|im_start|>system
{self.system_instruction}
<|im_end|>
<|im_start|>user
{prompt}
<|im_end|>
<|im_start|>assistant
"""
