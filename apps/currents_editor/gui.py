"""Single-page editing GUI served at the editor root route."""

from __future__ import annotations

_FIELDS = (
    "url_1",
    "url_2",
    "url_3",
    "image_top",
    "image_bottom",
    "image_alt",
    "audio_top",
    "audio_bottom",
    "audio_caption",
)

_PAGE = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <title>Currents editor (dev only)</title>
  <style>
    :root { color-scheme: light dark; }
    body { font: 14px/1.3 system-ui, sans-serif; margin: 16px; max-width: 1100px; }
    .grid { display: grid; grid-template-columns: 320px 1fr; gap: 16px; align-items: start; }
    .card { border: 1px solid rgba(127,127,127,.35); border-radius: 10px; padding: 12px; }
    h1 { font-size: 16px; letter-spacing: .12em; text-transform: uppercase; margin: 0 0 12px; }
    label { display: block; font-size: 12px; opacity: .85; margin: 10px 0 4px; }
    input, textarea { width: 100%; box-sizing: border-box; padding: 8px; border-radius: 8px;
                      border: 1px solid rgba(127,127,127,.35); background: transparent; color: inherit; }
    textarea { min-height: 260px; resize: vertical; }
    .btns { display: flex; gap: 8px; margin-top: 12px; }
    button { padding: 8px 10px; border-radius: 10px; border: 1px solid rgba(127,127,127,.35);
             background: transparent; color: inherit; cursor: pointer; }
    ul { list-style: none; padding: 0; margin: 0; }
    li { padding: 8px; border-radius: 8px; cursor: pointer; border: 1px solid transparent; }
    li.active { border-color: rgba(127,127,127,.65); }
    .meta, .notice { font-size: 12px; opacity: .8; margin-top: 4px; }
  </style>
</head>
<body>
  <h1>Currents editor (dev only)</h1>
  <div class="grid">
    <div class="card">
      <strong>Entries</strong> <button id="refreshBtn" type="button">Refresh</button>
      <ul id="list"></ul>
    </div>
    <div class="card">
      <label>Date</label><input id="date" type="date" />
      <label>Status</label><input id="status" type="text" placeholder="active" />
      <label>Title</label><input id="title" type="text" />
      <label>Tags (comma-separated)</label><input id="tags" type="text" />
      __FIELD_INPUTS__
      <label>Body (Markdown)</label><textarea id="body" spellcheck="false"></textarea>
      <div class="btns">
        <button id="newBtn" type="button">New</button>
        <button id="createBtn" type="button">Create file</button>
        <button id="saveBtn" type="button">Save</button>
      </div>
      <div class="notice" id="msg"></div>
    </div>
  </div>
<script>
  const API = "__API_BASE__";
  const FIELDS = __FIELD_NAMES__;
  const $ = (id) => document.getElementById(id);
  let currentFile = null;
  let currentId = null;

  const setMsg = (t) => { $("msg").textContent = t || ""; };
  const today = () => new Date().toISOString().slice(0, 10);

  const call = async (path, body) => {
    const opts = body === undefined ? {} : {
      method: "POST",
      headers: { "content-type": "application/json" },
      body: JSON.stringify(body),
    };
    const r = await fetch(API + path, opts);
    const out = await r.json();
    if (!out.success) throw new Error((out.error && out.error.message) || "request failed");
    return out.data;
  };

  const fill = (file, data, body) => {
    currentFile = file;
    currentId = data.id || null;
    $("date").value = data.date || today();
    $("status").value = data.status || "active";
    $("title").value = data.title || "";
    $("tags").value = (data.tags || []).join(", ");
    for (const f of FIELDS) $(f).value = data[f] || "";
    $("body").value = body || "";
  };

  const gather = () => {
    const data = {
      id: currentId,
      date: $("date").value,
      title: $("title").value,
      status: ($("status").value || "active").trim(),
      tags: $("tags").value.split(",").map(s => s.trim()).filter(Boolean),
    };
    for (const f of FIELDS) data[f] = $(f).value;
    return { file: currentFile, data, body: $("body").value };
  };

  const loadList = async () => {
    const items = await call("/list");
    $("list").innerHTML = "";
    for (const it of items) {
      const li = document.createElement("li");
      const name = document.createElement("strong");
      name.textContent = it.title || it.file;
      const meta = document.createElement("div");
      meta.className = "meta";
      meta.textContent = (it.date || "") + " / " + (it.status || "active");
      li.append(name, meta);
      li.addEventListener("click", async () => {
        [...$("list").children].forEach(x => x.classList.remove("active"));
        li.classList.add("active");
        const payload = await call("/read?file=" + encodeURIComponent(it.file));
        fill(payload.file, payload.data, payload.body);
        setMsg("Loaded: " + it.file);
      });
      $("list").appendChild(li);
    }
  };

  $("refreshBtn").addEventListener("click", loadList);
  $("newBtn").addEventListener("click", () => { fill(null, {}, ""); setMsg("New entry (not saved)."); });
  $("createBtn").addEventListener("click", async () => {
    try {
      const out = await call("/create", gather());
      currentFile = out.file;
      currentId = out.id;
      setMsg("Created: " + out.file);
      await loadList();
    } catch (e) { setMsg(e.message); }
  });
  $("saveBtn").addEventListener("click", async () => {
    if (!currentFile) return setMsg("No file loaded. Use Create file first.");
    try {
      const out = await call("/save", gather());
      setMsg("Saved: " + out.file);
      await loadList();
    } catch (e) { setMsg(e.message); }
  });

  fill(null, {}, "");
  loadList().catch(e => setMsg(e.message));
</script>
</body>
</html>
"""


def render_gui(api_base: str) -> str:
    inputs = "\n      ".join(
        f'<label>{name}</label><input id="{name}" type="text" />' for name in _FIELDS
    )
    names = "[" + ", ".join(f'"{name}"' for name in _FIELDS) + "]"
    return (
        _PAGE.replace("__FIELD_INPUTS__", inputs)
        .replace("__FIELD_NAMES__", names)
        .replace("__API_BASE__", api_base)
    )
