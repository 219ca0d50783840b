"""Traditional Chinese display strings for the catalog vocabularies and UI."""
from __future__ import annotations

from domain.entities import FacetCategory, Locale

FACET_LABELS_ZH: dict[FacetCategory, dict[str, str]] = {
    FacetCategory.DEPARTMENTS: {
        "Executive Committee": "事工委員會",
        "Missions Department": "宣教部",
        "Nurture & Education Department": "培育部",
        "Pastoral Department (Adult Zone)": "牧養部成人牧區",
        "Pastoral Department (Youth Zone)": "牧養部青少年牧區",
        "Pastoral Department (Children Zone)": "牧養部兒童牧區",
        "Admin & Resources Department": "行政資源部",
        "Worship Department": "敬拜部",
    },
    FacetCategory.MINISTRIES: {
        "General": "一般",
        "Short-term Mission": "短宣",
        "English Class": "英文班",
        "Cha Kwo Ling Community": "茶果嶺社區",
        "Mommy's Group": "媽咪小組",
        "Homework Class": "功課班",
        "Shared Space": "共享空間",
    },
    FacetCategory.DOC_TYPES: {
        "Meeting Minutes": "會議記錄",
        "Annual Plan": "年度計劃",
        "Project Plan": "項目計劃",
        "Budget Report": "預算報告",
        "Event Proposal": "活動提案",
    },
    FacetCategory.STATUSES: {
        "Draft": "草稿",
        "Final": "最終版",
        "For Review": "審核中",
    },
}

# canonical title id -> rendering per locale
TITLES: dict[str, dict[Locale, str]] = {
    "executive-committee-minutes": {
        Locale.EN: "Executive Committee Meeting Minutes",
        Locale.ZH: "事委會議事記錄",
    },
    "children-zone-annual-plan-2024": {
        Locale.EN: "Pastoral Dept. (Children) 2024 Annual Plan",
        Locale.ZH: "牧養部兒童牧區2024年度計劃",
    },
    "monthly-financial-report": {
        Locale.EN: "Monthly Financial Report",
        Locale.ZH: "月會財務報表",
    },
    "short-term-mission-proposal": {
        Locale.EN: "Short-term Mission Proposal",
        Locale.ZH: "茶果嶺區活動預算",
    },
}

UI_LABELS: dict[Locale, dict[str, str]] = {
    Locale.EN: {
        "app_title": "Church Document Hub",
        "filter_documents": "Filter Documents",
        "search_placeholder": "Search by title...",
        "department": "Department",
        "ministry": "Ministry",
        "document_type": "Document Type",
        "year": "Year",
        "status": "Status",
        "all": "All",
        "clear_filters": "Clear Filters",
        "upload_document": "Upload Document",
        "document_title": "Document Title",
        "file": "File",
        "form_error": "Please provide a title and select a file.",
        "no_documents_found": "No documents found. Try adjusting your filters or uploading a new document.",
        "type": "Type",
        "uploaded": "Uploaded",
        "language_toggle": "中文",
    },
    Locale.ZH: {
        "app_title": "茶果嶺浸信會文件中心",
        "filter_documents": "篩選文件",
        "search_placeholder": "按標題搜索...",
        "department": "部門",
        "ministry": "事工",
        "document_type": "文件類型",
        "year": "年份",
        "status": "狀態",
        "all": "全部",
        "clear_filters": "清除篩選",
        "upload_document": "上傳文件",
        "document_title": "文件標題",
        "file": "檔案",
        "form_error": "請提供標題並選擇一個文件。",
        "no_documents_found": "找不到任何文件。請嘗試調整篩選條件或上傳新文件。",
        "type": "類型",
        "uploaded": "上傳於",
        "language_toggle": "English",
    },
}


def ui_label(key: str, locale: Locale) -> str:
    """Return a UI string, falling back to English and then to the key."""
    return UI_LABELS.get(locale, {}).get(key) or UI_LABELS[Locale.EN].get(key, key)


__all__ = ["FACET_LABELS_ZH", "TITLES", "UI_LABELS", "ui_label"]
