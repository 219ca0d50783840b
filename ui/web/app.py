"""Streamlit page for browsing, filtering and uploading documents."""
from __future__ import annotations

import streamlit as st

from application.use_cases.ingest_documents import add_document
from application.use_cases.search import search_documents
from domain.entities import WILDCARD, Attachment, DocumentDraft, FacetCategory, FilterCriteria, Locale
from infrastructure.config import Container, ContainerConfig, build_default_container
from infrastructure.localization import ui_label
from ui.logging_utils import setup_logging


@st.cache_resource
def get_container() -> Container:
    setup_logging()
    return build_default_container(ContainerConfig.from_env())


container = get_container()
translator = container.translator
vocabulary = container.vocabulary

if "locale" not in st.session_state:
    st.session_state.locale = container.default_locale.value
locale = Locale.parse(st.session_state.locale)


def t(key: str) -> str:
    return ui_label(key, locale)


FACET_KEYS = ("department", "ministry", "doc_type", "year", "status")


def clear_filters() -> None:
    st.session_state.search_text = ""
    for key in FACET_KEYS:
        st.session_state[key] = WILDCARD


def facet_select(label: str, category: FacetCategory | None, values, key: str):
    choices = [WILDCARD, *values]

    def fmt(value) -> str:
        if value == WILDCARD:
            return t("all")
        return translator.translate(category, value, locale) if category else str(value)

    return st.sidebar.selectbox(label, choices, format_func=fmt, key=key)


st.set_page_config(page_title=ui_label("app_title", locale))
header, toggle = st.columns([4, 1])
header.title(t("app_title"))
if toggle.button(t("language_toggle")):
    st.session_state.locale = Locale.ZH.value if locale is Locale.EN else Locale.EN.value
    st.rerun()

st.sidebar.header(t("filter_documents"))
search_text = st.sidebar.text_input(t("search_placeholder"), key="search_text")
department = facet_select(t("department"), FacetCategory.DEPARTMENTS, vocabulary.departments, "department")
ministry = facet_select(t("ministry"), FacetCategory.MINISTRIES, vocabulary.ministries, "ministry")
doc_type = facet_select(t("document_type"), FacetCategory.DOC_TYPES, vocabulary.doc_types, "doc_type")
year = facet_select(t("year"), None, vocabulary.years, "year")
status = facet_select(t("status"), FacetCategory.STATUSES, vocabulary.statuses, "status")
st.sidebar.button(t("clear_filters"), on_click=clear_filters, key="clear_filters")

with st.sidebar.expander(t("upload_document")):
    with st.form("upload", clear_on_submit=True):
        title = st.text_input(t("document_title"))
        uploaded = st.file_uploader(t("file"))
        upload_department = st.selectbox(
            t("department"),
            vocabulary.departments,
            format_func=lambda value: translator.translate(FacetCategory.DEPARTMENTS, value, locale),
        )
        upload_ministry = st.selectbox(
            t("ministry"),
            vocabulary.ministries,
            format_func=lambda value: translator.translate(FacetCategory.MINISTRIES, value, locale),
        )
        upload_doc_type = st.selectbox(
            t("document_type"),
            vocabulary.doc_types,
            format_func=lambda value: translator.translate(FacetCategory.DOC_TYPES, value, locale),
        )
        upload_year = st.selectbox(t("year"), vocabulary.years)
        upload_status = st.radio(
            t("status"),
            vocabulary.statuses,
            format_func=lambda value: translator.translate(FacetCategory.STATUSES, value, locale),
            horizontal=True,
        )
        if st.form_submit_button(t("upload_document")):
            attachment = None
            if uploaded is not None:
                attachment = Attachment(
                    filename=uploaded.name,
                    content_type=uploaded.type or "application/octet-stream",
                    data=uploaded.getvalue(),
                )
            try:
                document = add_document(
                    DocumentDraft(
                        title=title,
                        attachment=attachment,
                        department=upload_department,
                        ministry=upload_ministry,
                        doc_type=upload_doc_type,
                        year=upload_year,
                        status=upload_status,
                    ),
                    document_repository=container.document_repository,
                    vocabulary=vocabulary,
                )
            except ValueError:
                st.error(t("form_error"))
            else:
                st.success(translator.translate_title(document.title, locale))

criteria = FilterCriteria(
    search_text=search_text,
    department=department,
    ministry=ministry,
    doc_type=doc_type,
    year=year,
    status=status,
)
results = search_documents(
    criteria,
    locale=locale,
    document_repository=container.document_repository,
    translator=translator,
    vocabulary=vocabulary,
)

if not results:
    st.info(t("no_documents_found"))
for item in results:
    document = item.document
    with st.container(border=True):
        st.subheader(translator.translate_title(document.title, locale))
        st.write(
            {
                t("department"): translator.translate(FacetCategory.DEPARTMENTS, document.department, locale),
                t("ministry"): translator.translate(FacetCategory.MINISTRIES, document.ministry, locale),
                t("type"): translator.translate(FacetCategory.DOC_TYPES, document.doc_type, locale),
                t("year"): document.year,
                t("status"): translator.translate(FacetCategory.STATUSES, document.status, locale),
                t("uploaded"): document.created_at.date().isoformat(),
            }
        )
