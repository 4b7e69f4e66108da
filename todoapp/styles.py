"""
Light slate design tokens shared by the pages.

Rules:
- Keep long class strings here; pages combine constants.
- One padding source: the outer card defines padding; inner layout uses gap only.
"""

C_FONT_STACK = '"Inter", system-ui, -apple-system, "Segoe UI", Roboto, Arial, sans-serif'

# Doubled braces survive the f-string.
APP_HEAD_HTML = f"""
<style>
  body, .q-body, .nicegui-content {{
    font-family: {C_FONT_STACK};
    background: linear-gradient(135deg, #ffffff 0%, #f9fafb 100%) !important;
    color: #0f172a;
  }}
  .q-btn {{ box-shadow: none !important; text-transform: none; }}
</style>
"""

C_BG = "min-h-screen w-full flex items-center justify-center p-6"
C_CONTAINER = "w-full max-w-xl"
C_CARD = "w-full bg-white rounded-2xl shadow-lg p-6 gap-4"

C_PAGE_TITLE = "text-2xl font-semibold"
C_SUBTITLE = "text-sm text-gray-500"

C_INPUT = "flex-1"
C_BTN_PRIM = "px-4 rounded-lg bg-indigo-600 text-white hover:bg-indigo-700"
C_BTN_SEC = "px-3 rounded border"
C_BTN_DANGER = "px-3 rounded bg-red-100 text-red-900"
C_BTN_SAVE = "px-3 rounded bg-green-100 text-green-900"
C_FILTER = "px-3 rounded-lg border"
C_FILTER_ACTIVE = "px-3 rounded-lg bg-indigo-100"

C_ROW = "w-full items-center justify-between gap-3 p-3 rounded-lg border no-wrap"
C_TITLE = "flex-1 cursor-pointer"
C_TITLE_DONE = "flex-1 cursor-pointer line-through text-gray-400"
C_EMPTY = "w-full py-8 text-center text-gray-400"
C_FOOTER = "w-full items-center justify-between text-sm text-gray-600"
