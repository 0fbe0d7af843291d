"""
The example runners. Each runner prints a header, creates the
configured chat model and walks through a few demonstrations of a
Langchain feature, printing the results:

    ```python
    from lcdemo.examples import run_chains
    run_chains()    # settings read from config.toml
    ```

Failures are logged, and the runner returns to the caller.
"""

# pyright: reportUnusedImport=false
# flake8: noqa

from .basic_llm import run_basic_llm
from .chains import run_chains
from .prompt_templates import run_prompt_templates
from .memory import run_memory
from .agents import run_agents
from .document_processing import run_document_processing
from .output_parsers import run_output_parsers
from .streaming import run_streaming
