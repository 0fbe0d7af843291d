"""LangChain/LangGraph interface to language models

This package connects the settings in config.toml to the LangChain
objects used by the examples:

- model objects (models.py): they wrap calling and receiving messages
    to and from the language model.
- chains (chains.py): prompt templates composed with a model through
    the runnable interface, called with .invoke/.stream.
- agents (agents.py): graphs in which the model decides which tools
    to call before answering.
"""
