import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from avlmap.indexing import AVLTreeMap

app = Flask(__name__)

tree = AVLTreeMap()

KEY_TYPE = os.environ.get("AVLMAP_KEY_TYPE", "int").strip().lower()
HOST = os.environ.get("AVLMAP_HOST", "127.0.0.1")
PORT = int(os.environ.get("AVLMAP_PORT", "5000"))
DEBUG = os.environ.get("AVLMAP_DEBUG", "").strip().lower() in ("1", "true", "yes")

STATE: Dict[str, Any] = {"key_type": KEY_TYPE, "started": False}


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status

def parse_key(raw: str) -> Optional[Any]:
    """Convert a URL path segment into a map key of the configured type."""
    raw = (raw or "").strip()
    if not raw:
        return None
    if STATE["key_type"] == "int":
        try:
            return int(raw)
        except ValueError:
            return None
    return raw

def warm_start():
    print(f"[startup] key type: {STATE['key_type']}")
    if STATE["key_type"] not in ("int", "str"):
        print(f"[startup] Unknown key type {STATE['key_type']!r}, falling back to 'str'")
        STATE["key_type"] = "str"
    STATE["started"] = True


@app.get("/api/status")
def api_status():
    return ok({
        "key_type": STATE["key_type"],
        "size": len(tree),
        "height": tree.height(),
        "is_empty": tree.is_empty(),
    })


@app.get("/api/map")
def api_map_items():
    limit = request.args.get("limit", "50")
    try:
        limit = max(1, min(200, int(limit)))
    except ValueError:
        limit = 50

    rows: List[Dict[str, Any]] = []
    for key, value in tree.iter():
        rows.append({"key": key, "value": value})
        if len(rows) >= limit:
            break
    return ok({"count_returned": len(rows), "size": len(tree), "rows": rows})


@app.get("/api/map/<raw_key>")
def api_map_get(raw_key: str):
    key = parse_key(raw_key)
    if key is None:
        return err(f"key must be of type '{STATE['key_type']}'")

    if not tree.contains_key(key):
        return err("key not found", 404)
    return ok({"key": key, "value": tree.get(key)})


@app.put("/api/map/<raw_key>")
def api_map_put(raw_key: str):
    key = parse_key(raw_key)
    if key is None:
        return err(f"key must be of type '{STATE['key_type']}'")

    data = request.get_json(silent=True)
    if not isinstance(data, dict) or "value" not in data:
        return err("JSON body with a 'value' field required")

    created = not tree.contains_key(key)
    previous = tree.insert(key, data["value"])
    return ok({"key": key, "previous": previous, "created": created}, height=tree.height())


@app.delete("/api/map/<raw_key>")
def api_map_delete(raw_key: str):
    key = parse_key(raw_key)
    if key is None:
        return err(f"key must be of type '{STATE['key_type']}'")

    if not tree.contains_key(key):
        return err("key not found", 404)
    removed = tree.remove(key)
    return ok({"key": key, "removed": removed}, height=tree.height())


if __name__ == "__main__":
    warm_start()
    app.run(host=HOST, port=PORT, debug=DEBUG, use_reloader=False)
