# platforms/perplexity_platform.py
from .openai_compatible_platform import OpenAICompatiblePlatform


class PerplexityPlatform(OpenAICompatiblePlatform):
    id = "perplexity"
    name = "Perplexity"
    api_key_env = "PERPLEXITY_API_KEY"
    base_url = "https://api.perplexity.ai"

    def validate_credentials(self):
        # Perplexity has no model-list endpoint, so only key presence is checked
        if self._credentials_valid is None:
            self._credentials_valid = self.has_credentials()
        return self._credentials_valid
