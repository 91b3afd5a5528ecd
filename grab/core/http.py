import requests

from .. import __version__

UA = f"grab/{__version__}"
ACCEPT = "application/vnd.github+json"

def make_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({"User-Agent": UA, "Accept": ACCEPT})
    return s

SESSION = make_session()
