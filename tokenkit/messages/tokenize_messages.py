# tokenkit/messages/tokenize_messages.py

# ✅ Positive
TOKENIZE_SUCCESS = "Text tokenized successfully."
BATCH_TOKENIZE_SUCCESS = "Texts tokenized successfully."
CONFIG_FETCHED = "Current default configuration."
CONFIG_UPDATED = "Default configuration updated."
CONFIG_RESET = "Default configuration reset to factory defaults."
CONFIG_VALID = "Configuration is valid."

# ❌ Errors
TEXT_TOO_LARGE = "Text exceeds the maximum allowed length."
TOKENIZE_FAILED = "Tokenization failed due to internal server error."
