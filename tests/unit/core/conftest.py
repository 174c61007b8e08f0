"""Shared fixtures for core unit tests"""

import pytest


# Indented-body document: a file block referencing a block defined right after it.
SAMPLE_MD = """\
###### file:out.txt
    header
    - ###### items ###### -
    footer
###### items
    one
    two
"""

# Fenced-body document with prose between blocks and a language hint.
SAMPLE_FENCED_MD = """\
# Example

Some prose.

###### file:hello.py
```python
def main():
    ###### body
```

The body:

###### body
```
print("hi")
return 0
```
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fenced_md")
def sample_fenced_md_fixture():
    return SAMPLE_FENCED_MD


@pytest.fixture(name="sample_file")
def sample_file_fixture(tmp_path):
    f = tmp_path / "doc.md"
    f.write_text(SAMPLE_MD)
    return f
