import os

# Qt-тесты должны работать без дисплея
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
