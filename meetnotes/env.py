import os


# utilities
def tobool(val: str | None):
    if val is None:
        return False
    val = val.lower().strip()
    if val in ['y', 'yes', 'true', '1']:
        return True
    return False


# general
app_port = int(os.environ.get('PORT', 5000))
log_level = os.environ.get('LOG_LEVEL', 'DEBUG').strip().upper()
supported_modules = {'summaries', 'share'}
enabled_modules = set(os.environ.get('ENABLED_MODULES', 'summaries,share').split(','))
modules = supported_modules.intersection(enabled_modules)

# gemini
gemini_api_key = os.environ.get('GEMINI_API_KEY')
gemini_model = os.environ.get('GEMINI_MODEL', 'gemini-pro')
gemini_api_base_url = os.environ.get('GEMINI_API_BASE_URL', 'https://generativelanguage.googleapis.com/v1beta')

# mail
email_user = os.environ.get('EMAIL_USER')
email_pass = os.environ.get('EMAIL_PASS')
smtp_host = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
smtp_port = int(os.environ.get('SMTP_PORT', 465))

# monitoring
enable_metrics = tobool(os.environ.get('ENABLE_METRICS', 'true'))
metrics_port = int(os.environ.get('METRICS_PORT', 8001))
