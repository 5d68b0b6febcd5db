"""Package entry point for ``python -m script_captions``.

WHY: Users run the tool as ``python -m script_captions transcript.srt``.
Python's ``-m`` flag looks for ``__main__.py`` inside the package and
executes it.
"""

from script_captions.cli import main

if __name__ == "__main__":
    main()
