class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    ANSWER_PREFIX = "ui.answer."
    NAV_BACK = "ui.nav.back"
    NAV_NEXT = "ui.nav.next"
    NEW_REQUEST = "ui.success.new_request"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    WIZARD_SESSION_READY = "_wizard_session_ready"
    SUBMISSIONS = "intake.submissions"
    SCROLL_TO_TOP = "_wizard_scroll_to_top"
    TRANSITION_ERROR = "_wizard_transition_error"


class AnswerKeys:
    """Question keys used inside the answer set."""

    MAIN_SERVICE = "main-service"
    LIVE_TYPE = "live-type"
    HIRE_ROLE = "hire-role"
    HIRE_DETAILS = "hire-details"
    EVENT_TYPE = "event-type"
    HAS_LIVE_MUSIC = "has-live-music"
    PERFORMERS = "performers"
    LOCATION_NAME = "loc-name"
    EVENT_DATE = "event-date"
    EVENT_DETAILS = "event-details"
    STUDIO_TYPE = "studio-type"
    STUDIO_DETAILS = "studio-details"
    NABEWERKING_TYPE = "nabewerking-type"
    NABEWERKING_DETAILS = "nabewerking-details"
    ADVIES_WHO = "advies-who"
    ADVIES_GOAL = "advies-goal"
    ADVIES_RUIMTE = "advies-ruimte"
    ADVIES_DOEL = "advies-doel"
    ADVIES_METHODE = "advies-methode"
    ADVIES_GEBRUIK = "advies-gebruik"
    ADVIES_KOPEN_DETAILS = "advies-kopen-details"
    ANDERS_DETAILS = "anders-details"
    CONTACT_NAME = "contact-name"
    CONTACT_EMAIL = "contact-email"
    CONTACT_PHONE = "contact-phone"
    CONTACT_PREF = "contact-pref"

    # Multi-select steps store one boolean per option under ``<prefix><option>``.
    INSTRUMENT_PREFIX = "instrument-"
    EQUIPMENT_PREFIX = "equip-"
    KOPEN_TYPE_PREFIX = "kopen-type-"
