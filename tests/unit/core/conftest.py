"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_PASTE = """\
# Bankroll Basics

Most players go broke because
they ignore variance.

:::warning Be Careful
Never sit with more than 5% of your roll.
:::

- Track every session
2. Review hands weekly

> Poker is a hard way to make an easy living -- Doyle Brunson

```python
roi = profit / buyins
```

https://abc.supabase.co/storage/v1/object/public/articles/chart.png
"""

SAMPLE_HTML = """\
<meta charset="utf-8">
<div>
  <h1>Bankroll Basics</h1>
  <p>Most players <strong>go broke</strong>.</p>
  <aside>💡 Keep a buffer.</aside>
  <ul><li>Track sessions</li><li>Review <em>hands</em></li></ul>
  <pre><code class="language-python">roi = profit / buyins
</code></pre>
  <p>https://abc.supabase.co/storage/v1/object/public/articles/chart.png</p>
</div>
"""


@pytest.fixture(name="sample_paste")
def sample_paste_fixture():
    return SAMPLE_PASTE


@pytest.fixture(name="sample_html")
def sample_html_fixture():
    return SAMPLE_HTML
