"""Static Arabic/English string tables for the frontend."""
from typing import Dict, Literal

Language = Literal['ar', 'en']

DEFAULT_LANGUAGE: Language = 'ar'

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    'ar': {
        # App
        'app.title': 'تطبيق إدارة المصروفات',
        'app.settings': 'الإعدادات',
        'app.language': 'اللغة',
        'app.close': 'إغلاق',

        # Expense form
        'expense.add': 'إضافة مصروف جديد',
        'expense.edit': 'تعديل المصروف',
        'expense.description': 'الوصف',
        'expense.category': 'الفئة',
        'expense.amount': 'المبلغ (جنيه مصري)',
        'expense.date': 'التاريخ',
        'expense.status': 'الحالة',
        'expense.save': 'حفظ',
        'expense.cancel': 'إلغاء',
        'expense.delete': 'حذف',
        'expense.edit_btn': 'تعديل',

        'category.maintenance': 'أعمال صيانة',
        'category.home': 'منزل',
        'category.other': 'أخرى',

        'status.paid': 'مدفوع',
        'status.unpaid': 'غير مدفوع',

        # Table headers
        'table.description': 'الوصف',
        'table.category': 'الفئة',
        'table.amount': 'المبلغ',
        'table.date': 'التاريخ',
        'table.status': 'الحالة',
        'table.actions': 'الإجراءات',

        'message.no_expenses': 'لا توجد مصروفات',
        'message.error': 'حدث خطأ',
        'message.success': 'تم الحفظ بنجاح',
    },
    'en': {
        # App
        'app.title': 'Expense Tracker',
        'app.settings': 'Settings',
        'app.language': 'Language',
        'app.close': 'Close',

        # Expense form
        'expense.add': 'Add New Expense',
        'expense.edit': 'Edit Expense',
        'expense.description': 'Description',
        'expense.category': 'Category',
        'expense.amount': 'Amount (EGP)',
        'expense.date': 'Date',
        'expense.status': 'Status',
        'expense.save': 'Save',
        'expense.cancel': 'Cancel',
        'expense.delete': 'Delete',
        'expense.edit_btn': 'Edit',

        'category.maintenance': 'Maintenance Work',
        'category.home': 'Home',
        'category.other': 'Other',

        'status.paid': 'Paid',
        'status.unpaid': 'Unpaid',

        # Table headers
        'table.description': 'Description',
        'table.category': 'Category',
        'table.amount': 'Amount',
        'table.date': 'Date',
        'table.status': 'Status',
        'table.actions': 'Actions',

        'message.no_expenses': 'No expenses found',
        'message.error': 'An error occurred',
        'message.success': 'Saved successfully',
    },
}


def text_direction(language: Language) -> str:
    return 'rtl' if language == 'ar' else 'ltr'


def translate(key: str, language: Language = DEFAULT_LANGUAGE) -> str:
    """Looks up key in the language's table, falling back to the key itself."""
    return TRANSLATIONS.get(language, {}).get(key) or key


def translation_table(language: Language = DEFAULT_LANGUAGE) -> Dict[str, object]:
    return {
        'language': language,
        'direction': text_direction(language),
        'strings': dict(TRANSLATIONS[language]),
    }
