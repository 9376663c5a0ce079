"""
AI Chat module for South Florida climate risk questions.

Matches each question against curated neighborhood data, builds a localized
system prompt and relays the model's answer, buffered or streamed.
"""
