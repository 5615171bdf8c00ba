"""
VideoKit 전용 플래그
"""

# ━━━ 검색 결과 설정 ━━━
MAX_SEARCH_RESULTS = 10  # YouTube API 검색 시 전략당 최대 결과 수
TARGET_RESULTS = 5       # 누적 후보가 이 개수에 도달하면 다음 전략은 건너뜀
DEFAULT_MAX_RESULTS = 5  # 최종 반환 개수 기본값
MAX_SUBTOPICS = 3        # 다중 주제 요청 시 검색할 최대 주제 수
PER_SUBTOPIC_RESULTS = 2  # 다중 주제 요청 시 주제당 영상 수

# ━━━ 쇼츠 필터 ━━━
MIN_DURATION_SECONDS = 120  # 2분 미만 영상 제외 (search_simple)

# ━━━ 응답 포맷 ━━━
PROMPT_CANDIDATES = 3        # LLM 프롬프트에 넣을 후보 수
DIRECT_MAX_RESULTS = 5       # 직접 목록 모드 최대 개수
DESCRIPTION_MAX_LENGTH = 500  # 프롬프트에 넣을 설명 최대 글자 수

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 관련도 점수 가중치
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

WEIGHT_VIEWS = 0.6       # log10(조회수 + 1)
WEIGHT_ENGAGEMENT = 0.3  # 좋아요 / 조회수
WEIGHT_FRESHNESS = 0.1   # 1년 기준 최신성

FRESHNESS_WINDOW_MS = 365 * 24 * 60 * 60 * 1000  # 365일 (ms)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# 영상 요청 판별 (서버 설정의 기본값으로 주입됨)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

TRIGGER_PHRASES = (
    "find a video",
    "find me a video",
    "show me a video",
    "video about",
    "videos about",
    "find videos",
    "search for video",
    "recommend a video",
)
DIRECTIVE_PREFIX = "find educational videos about:"

# ━━━ 검색 전략 ━━━
STRATEGY_TEMPLATES = (
    "{topic} education tutorial",
    "{topic}",
)
TRUSTED_CHANNELS = (
    "Khan Academy",
    "CrashCourse",
    "MIT OpenCourseWare",
    "3Blue1Brown",
    "freeCodeCamp.org",
    "TED-Ed",
)
