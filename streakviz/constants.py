"""Named constants for languages, step ids, visual elements and limits."""

from __future__ import annotations

# ── Languages ────────────────────────────────────────────────────

LANG_JAVA = "java"
LANG_PYTHON = "python"
LANG_GOLANG = "golang"
LANG_JAVASCRIPT = "javascript"

SUPPORTED_LANGUAGES: tuple[str, ...] = (
    LANG_JAVA,
    LANG_PYTHON,
    LANG_GOLANG,
    LANG_JAVASCRIPT,
)

BASELINE_LANGUAGE = LANG_JAVA
DEFAULT_LANGUAGE = LANG_JAVASCRIPT

# tree-sitter-language-pack grammar names
TREE_SITTER_GRAMMARS: dict[str, str] = {
    LANG_JAVA: "java",
    LANG_PYTHON: "python",
    LANG_GOLANG: "go",
    LANG_JAVASCRIPT: "javascript",
}

# ── Input bounds ─────────────────────────────────────────────────

MAX_INPUT_LENGTH = 100
MIN_INPUT_VALUE = -1_000_000_000
MAX_INPUT_VALUE = 1_000_000_000

RANDOM_MIN_LENGTH = 5
RANDOM_MAX_LENGTH = 20
RANDOM_MIN_VALUE = -50
RANDOM_MAX_VALUE = 50

# ── Step base ids ────────────────────────────────────────────────

STEP_CREATE_HASHSET = "create_hashset"
STEP_ADD_TO_HASHSET = "add_to_hashset"
STEP_SKIP_DUPLICATE = "skip_duplicate"
STEP_INIT_LONGEST_STREAK = "init_longest_streak"
STEP_FOR_EACH_NUM = "for_each_num"
STEP_CHECK_SEQUENCE_START = "check_sequence_start"
STEP_INIT_CURRENT_NUM = "init_current_num"
STEP_WHILE_LOOP_CHECK = "while_loop_check"
STEP_INCREMENT_CURRENT = "increment_current"
STEP_WHILE_LOOP_EXIT = "while_loop_exit"
STEP_UPDATE_LONGEST_STREAK = "update_longest_streak"
STEP_NO_UPDATE_LONGEST_STREAK = "no_update_longest_streak"
STEP_RETURN_RESULT = "return_result"

EMITTED_BASE_IDS: tuple[str, ...] = (
    STEP_CREATE_HASHSET,
    STEP_ADD_TO_HASHSET,
    STEP_SKIP_DUPLICATE,
    STEP_INIT_LONGEST_STREAK,
    STEP_FOR_EACH_NUM,
    STEP_CHECK_SEQUENCE_START,
    STEP_INIT_CURRENT_NUM,
    STEP_WHILE_LOOP_CHECK,
    STEP_INCREMENT_CURRENT,
    STEP_WHILE_LOOP_EXIT,
    STEP_UPDATE_LONGEST_STREAK,
    STEP_NO_UPDATE_LONGEST_STREAK,
    STEP_RETURN_RESULT,
)

STEP_ID_SUFFIX_PATTERN = r"_(\d+)$"

# ── Visual element ids ───────────────────────────────────────────

ARRAY_TITLE_ID = "array-title"
HASHSET_TITLE_ID = "hashset-title"
LONGEST_VAR_ID = "longest-var"
LONGEST_SEQ_LABEL_ID = "longest-seq-label"
LONGEST_SEQ_ID = "longest-seq"
CURRENT_SEQ_ID = "current-seq"
SEQUENCE_START_ID = "sequence-start"

ARRAY_CELL_TEMPLATE = "array-{index}"
HASHSET_CELL_TEMPLATE = "hashset-{value}"

# ── Playback ─────────────────────────────────────────────────────

DEFAULT_PLAY_SPEED = 1.0
PLAY_SPEEDS: tuple[float, ...] = (0.5, 1.0, 1.5, 2.0, 3.0)

# ── Settings cache ───────────────────────────────────────────────

CACHE_DURATION_SECONDS = 60 * 60
SETTINGS_KEY = "user-settings"
DEFAULT_SETTINGS_FILENAME = ".streakviz-cache.json"
