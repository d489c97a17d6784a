ROLE_ADMIN = "admin"
ROLE_CUSTOMER = "customer"
DEFAULT_ROLE = ROLE_CUSTOMER

# Page targets used by st.switch_page for role-based redirects
HOME_PAGE = "Main.py"
LOGIN_PAGE = "pages/6_Login.py"
CUSTOMER_HOME_PAGE = "pages/10_Customer_Dashboard.py"
ADMIN_HOME_PAGE = "pages/20_Admin_Dashboard.py"

STATUS_COLOR_MAP = {
    "scheduled": "blue",
    "in_progress": "orange",
    "completed": "green",
    "cancelled": "gray",
    "pending": "orange",
    "partial": "orange",
    "paid": "green",
    "overdue": "red",
    "draft": "gray",
    "sent": "blue",
    "viewed": "violet",
    "approved": "green",
    "denied": "red",
    "expired": "gray",
    "new": "blue",
    "read": "gray",
}

SCHEDULE_STATUSES = ["scheduled", "in_progress", "completed", "cancelled"]
JOB_STATUSES = ["scheduled", "in_progress", "completed", "cancelled"]
JOB_TYPE_ONE_TIME = "one_time"
JOB_TYPE_ROUTE_STOP = "route_stop"

INVOICE_OPEN_STATUSES = {"pending", "partial", "overdue"}
PAYMENT_METHODS = ["credit_card", "ach", "check", "cash"]
RECEIPT_EMAIL_TYPE = "payment_receipt"

QUOTE_STATUSES = ["draft", "sent", "viewed", "approved", "denied", "expired"]
QUOTE_DECISIONS = {"approved", "denied"}

# Pool DNA
SERVICE_OVERDUE_DAYS = 30
SERVICE_OVERDUE_SUGGESTION = (
    "It's been over 30 days since your last service. "
    "We recommend scheduling maintenance soon."
)
