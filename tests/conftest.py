import pytest

access_log = [
    '127.0.0.1 - - [26/Feb/2015 19:25:25] "GET /static/r.js HTTP/1.1"\n',
    '127.0.0.5 - - [26/Feb/2015 19:27:35] "GET /blog/ HTTP/1.1" 200 -\n',
    '127.0.0.1 - - [28/Feb/2015 16:44:03] "GET / HTTP/1.1" 200 -\n',
    '127.0.0.1 - - [28/Feb/2015 16:44:03] "POST / HTTP/1.1" 200 -\n',
    '127.0.0.9 - - [28/Feb/2015 16:45:10] "GET /about HTTP/1.1" 200 -',
]


def build_file(root, sub_path, content):
    """
    Helper function to build a file under a root.
    Returns the full path of the created file.
    """
    p = root / sub_path
    with p.open("w") as fd:
        fd.write(content)
    return p


@pytest.fixture
def logfile(tmp_path):
    return build_file(tmp_path, "access.log", "".join(access_log))
