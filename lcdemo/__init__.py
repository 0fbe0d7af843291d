"""
A menu of examples of the Langchain framework: completion, chains,
prompt templates, memory, agents with tools, text splitting, output
parsing and streaming.

Run with `python -m lcdemo` or the `lcdemo` script. The model and the
parameters of the examples are read from config.toml in the working
directory, and from LCDEMO_ environment variables.
"""
