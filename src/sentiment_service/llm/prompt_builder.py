"""
Prompt builder for sentiment classification.

Renders a fixed few-shot template around the input sentence and wraps it
in an LLMGenerationRequest with a small token budget. The template lives in
this module rather than on disk: it is part of the parsing contract, since
the output parser expects the "Bot: <label>" line format taught here.
"""

from jinja2 import Environment, StrictUndefined
import structlog

from sentiment_service.models.llm_models import LLMGenerationRequest


logger = structlog.get_logger(__name__)


SENTIMENT_PROMPT_TEMPLATE = """\
<<SYS>>
You are a bot that generates sentiment analysis responses. Respond with a single positive, negative, or neutral.
<</SYS>>
<INST>
Follow the pattern of the following examples:

{% for example in examples %}
User: {{ example.sentence }}
Bot: {{ example.label }}
{% if not loop.last %}

{% endif %}
{% endfor %}
</INST>

User: {{ sentence }}
"""

# One worked example per label, in the order the model sees them
FEW_SHOT_EXAMPLES = (
    {"sentence": "Hi, my name is Bob", "label": "neutral"},
    {"sentence": "I am so happy today", "label": "positive"},
    {"sentence": "I am so sad today", "label": "negative"},
)


class PromptBuilder:
    """
    Build generation requests for the sentiment classifier.
    
    The template is compiled once; build_prompt is a pure function of the
    sentence.
    """
    
    def __init__(
        self,
        model: str = "llama2:7b-chat",
        temperature: float = 0.1,
        max_tokens: int = 8,
    ):
        """
        Args:
            model: Model name placed on every request
            temperature: Sampling temperature
            max_tokens: Hard cap on generated tokens (only a label line is expected)
        """
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        
        self.jinja_env = Environment(
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False  # We're generating prompts, not HTML
        )
        self.template = self.jinja_env.from_string(SENTIMENT_PROMPT_TEMPLATE)
        
        logger.info(
            "PromptBuilder initialized",
            model=model,
            max_tokens=max_tokens,
            examples=len(FEW_SHOT_EXAMPLES),
        )
    
    def build_prompt(self, sentence: str) -> str:
        """
        Render the few-shot prompt for one sentence.
        
        The sentence is substituted verbatim; callers pass it already trimmed.
        """
        return self.template.render(examples=FEW_SHOT_EXAMPLES, sentence=sentence)
    
    def build_request(self, sentence: str) -> LLMGenerationRequest:
        """
        Build the complete generation request for one sentence.
        
        Args:
            sentence: Normalized input sentence
            
        Returns:
            LLMGenerationRequest with the rendered prompt and token cap
        """
        return LLMGenerationRequest(
            prompt=self.build_prompt(sentence),
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
