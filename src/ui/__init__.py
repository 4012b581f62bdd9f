"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Webhook URL entry
    - Chat message display with streaming updates
    - Error banner and error-styled bot messages
    - "New chat" control

Contains no reconciliation logic. Reads ConversationState and delegates
every action to ChatEngine.
"""
