# =============================================================================
# Django Project Configuration Package
# =============================================================================
# This package contains the settings used to run the payments plugin on its
# own (development and tests). In production the host platform's settings
# include the "payments" app and define PAYMENT_RESULT_HANDLER.
# =============================================================================
