# core/constants.py
CATEGORIES = ["Trabalho", "Pessoal", "Saúde", "Estudos", "Outros"]
DEFAULT_CATEGORY = "Outros"

PRIORITY_LOW = "Baixa"
PRIORITY_MEDIUM = "Média"
PRIORITY_HIGH = "Alta"
PRIORITIES = [PRIORITY_LOW, PRIORITY_MEDIUM, PRIORITY_HIGH]

# filter selectors
ALL = "ALL"
PENDING = "PENDING"
DONE = "DONE"
STATUS_OPTIONS = [ALL, PENDING, DONE]
STATUS_LABELS = {ALL: "Todos", PENDING: "Pendentes", DONE: "Concluídos"}

# date filter modes
TODAY = "TODAY"
YESTERDAY = "YESTERDAY"
CUSTOM = "CUSTOM"
DATE_MODE_LABELS = {TODAY: "Hoje", YESTERDAY: "Ontem", CUSTOM: "Outro"}

BLOCK_TYPES = [
    "vendas", "financeiro", "operacional", "estrategico",
    "funil", "ads", "lp", "email", "checkout",
]
DEFAULT_BLOCK_TYPE = "estrategico"

PROJECT_TYPES = ["funil", "estrutura"]
COMPANIES = ["Empório Pascoto", "Pascoto100k"]

COPY_SUFFIX = " (Cópia)"

BUNDLE_KEYS = ["goals", "tasks", "notes", "projects", "blocks", "edges"]

# pt-BR abbreviated weekday names, Monday first
WEEKDAY_LABELS = ["SEG", "TER", "QUA", "QUI", "SEX", "SÁB", "DOM"]

THEME_MASCULINE = "masculine"
THEME_FEMININE = "feminine"
