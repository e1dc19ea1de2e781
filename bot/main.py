"""Telegram бот для диагностики личности"""
import html
import logging
from datetime import date
from typing import List, Optional, Tuple
from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import (
    Application, CommandHandler, MessageHandler,
    ConversationHandler, CallbackQueryHandler, filters, ContextTypes
)
from telegram.constants import ParseMode, ChatAction
from pydantic import ValidationError

from config import settings
from database.database import get_db_sync, init_db
from database.storage import AssessmentStorage
from personality_calculator import PersonalityCalculator, AssessmentInput
from personality_calculator.questions import QUESTIONS, question_by_id
from reports import ReportGenerator

# Настройка логирования
logging.basicConfig(
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=getattr(logging, settings.log_level.upper(), logging.INFO)
)
logger = logging.getLogger(__name__)

# Состояния разговора
WAITING_NAME, WAITING_DATE, WAITING_HOUR, WAITING_GENDER, WAITING_KANJI, WAITING_ANSWER = range(6)

# Лимит Telegram на длину сообщения с запасом
MAX_MESSAGE_LENGTH = 4000

GENDER_BUTTONS = [
    ("👨 男性", "male"),
    ("👩 女性", "female"),
    ("🌈 その他", "other"),
]

# Инициализация
calculator = PersonalityCalculator()
storage = AssessmentStorage()
report_generator = ReportGenerator()


def create_progress_indicator(current: int, total: int) -> str:
    """Создает индикатор прогресса"""
    filled = "█" * current
    empty = "░" * (total - current)
    percentage = int((current / total) * 100)
    return f"<code>{filled}{empty}</code> <b>{percentage}%</b> ({current}/{total})"


def parse_birth_date(text: str) -> date:
    """Разбирает дату рождения в формате ГГГГ.ММ.ДД (также / и -)

    Raises:
        ValueError: неверный формат, несуществующая дата, год до 1900 или дата в будущем
    """
    normalized = text.strip().replace('/', '.').replace('-', '.').replace(' ', '')
    parts = normalized.split('.')
    if len(parts) != 3:
        raise ValueError("invalid date format")

    year, month, day = map(int, parts)
    birth_date = date(year, month, day)

    if year < 1900:
        raise ValueError("birth year must be 1900 or later")
    if birth_date > date.today():
        raise ValueError("birth date cannot be in the future")
    return birth_date


def parse_birth_time(text: str) -> Tuple[int, Optional[int]]:
    """Разбирает время рождения: "14" или "14:30" """
    normalized = text.strip().replace('時', ':').replace('分', '').replace('：', ':').rstrip(':')
    hour_part, _, minute_part = normalized.partition(':')

    hour = int(hour_part)
    if not 0 <= hour <= 23:
        raise ValueError("hour must be between 0 and 23")

    minute = None
    if minute_part:
        minute = int(minute_part)
        if not 0 <= minute <= 59:
            raise ValueError("minute must be between 0 and 59")
    return hour, minute


def split_kanji_name(text: str) -> Tuple[str, str]:
    """Разделяет "姓 名" на фамилию и имя (обычный или полноширинный пробел)"""
    parts = text.replace('　', ' ').split()
    if len(parts) != 2:
        raise ValueError("expected surname and given name separated by a space")
    return parts[0], parts[1]


def split_message(text: str, max_length: int = MAX_MESSAGE_LENGTH) -> List[str]:
    """Делит длинный текст на части для отправки"""
    if len(text) <= max_length:
        return [text]
    return [text[i:i + max_length] for i in range(0, len(text), max_length)]


def build_question_keyboard(question: dict) -> InlineKeyboardMarkup:
    keyboard = [
        [InlineKeyboardButton(option['text'], callback_data=f"answer_{question['id']}_{option['value']}")]
        for option in question['options']
    ]
    return InlineKeyboardMarkup(keyboard)


def record_answer(answers: List[Tuple[int, str]], question_id: int, answer: str) -> bool:
    """Записывает ответ, только если он относится к текущему вопросу.

    Нажатия на кнопки старых сообщений и повторные нажатия игнорируются.
    """
    if len(answers) >= len(QUESTIONS) or QUESTIONS[len(answers)]['id'] != question_id:
        return False
    values = [option['value'] for option in question_by_id(question_id)['options']]
    if answer not in values:
        return False
    answers.append((question_id, answer))
    return True


def format_question(index: int) -> str:
    question = QUESTIONS[index]
    return (
        f"🧠 <b>質問 {index + 1} / {len(QUESTIONS)}</b>\n"
        f"{create_progress_indicator(index + 1, len(QUESTIONS))}\n\n"
        f"{html.escape(question['question'])}"
    )


def build_assessment_input(user_data: dict) -> AssessmentInput:
    """Собирает входные данные диагностики из состояния разговора"""
    birth_date = user_data['birth_date']
    return AssessmentInput(
        full_name=user_data['name'],
        birth_year=birth_date.year,
        birth_month=birth_date.month,
        birth_day=birth_date.day,
        gender=user_data['gender'],
        last_name_kanji=user_data.get('last_name_kanji'),
        first_name_kanji=user_data.get('first_name_kanji'),
        birth_hour=user_data.get('birth_hour'),
        birth_minute=user_data.get('birth_minute'),
        mbti_responses=[
            {'question_id': question_id, 'answer': answer}
            for question_id, answer in user_data.get('answers', [])
        ]
    )


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Обработчик команды /start"""
    user = update.effective_user

    keyboard = [
        [InlineKeyboardButton("✨ 診断を始める", callback_data="start_assessment")],
        [InlineKeyboardButton("📊 診断履歴", callback_data="history")]
    ]
    reply_markup = InlineKeyboardMarkup(keyboard)

    welcome_text = (
        "╔═══════════════════════════════════╗\n"
        "║   🔮 性格診断 🔮                  ║\n"
        "╚═══════════════════════════════════╝\n\n"
        f"👋 <b>{html.escape(user.first_name or '')}さん、ようこそ！</b>\n\n"
        "MBTI・算命学・姓名判断・四柱推命を組み合わせて、あなたの性格を診断します。\n\n"
        "📋 <b>必要な情報</b>\n"
        "• お名前\n"
        "• 生年月日 (YYYY.MM.DD)\n"
        "• 生まれた時刻（任意、四柱推命に使用）\n"
        "• 漢字の氏名（任意、姓名判断に使用）\n"
        "• 8つの質問への回答\n\n"
        "<code>/history</code> — 診断履歴\n"
        "<code>/cancel</code> — 中止"
    )

    await update.message.reply_text(welcome_text, reply_markup=reply_markup, parse_mode=ParseMode.HTML)


async def begin_assessment(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Начало диагностики: запрашиваем имя"""
    context.user_data.clear()
    text = (
        "✨ <b>性格診断</b>\n\n"
        "👤 <b>お名前</b>を入力してください。\n\n"
        "💡 <i>例: 山田 太郎</i>"
    )

    if update.callback_query:
        await update.callback_query.answer()
        await update.callback_query.edit_message_text(text, parse_mode=ParseMode.HTML)
    else:
        await update.message.reply_text(text, parse_mode=ParseMode.HTML)
    return WAITING_NAME


async def receive_name(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение имени"""
    name = update.message.text.strip()
    if not name:
        await update.message.reply_text("❌ お名前を入力してください。")
        return WAITING_NAME

    context.user_data['name'] = name
    await update.message.reply_text(
        f"✅ <b>{html.escape(name)}</b>さん\n\n"
        "📅 <b>生年月日</b>を入力してください。\n\n"
        "💡 <i>形式: YYYY.MM.DD（例: 1990.06.15）</i>\n"
        "💡 <i>1990-06-15 や 1990/06/15 も使えます</i>",
        parse_mode=ParseMode.HTML
    )
    return WAITING_DATE


async def receive_date(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение даты рождения"""
    try:
        birth_date = parse_birth_date(update.message.text)
    except ValueError as e:
        logger.info(f"Неверная дата рождения '{update.message.text}': {e}")
        await update.message.reply_text(
            "❌ <b>生年月日の形式が正しくありません</b>\n\n"
            "1900年以降の過去の日付を <b>YYYY.MM.DD</b> 形式で入力してください。\n\n"
            "💡 <i>例: 1990.06.15</i>",
            parse_mode=ParseMode.HTML
        )
        return WAITING_DATE

    context.user_data['birth_date'] = birth_date

    keyboard = [[InlineKeyboardButton("⏭️ スキップ", callback_data="hour_skip")]]
    await update.message.reply_text(
        f"✅ <b>{birth_date.year}年{birth_date.month}月{birth_date.day}日</b>\n\n"
        "🕐 <b>生まれた時刻</b>を入力してください（0〜23時）。\n\n"
        "💡 <i>例: 14 または 14:30</i>\n"
        "💡 <i>わからない場合はスキップできます（四柱推命は省略されます）</i>",
        reply_markup=InlineKeyboardMarkup(keyboard),
        parse_mode=ParseMode.HTML
    )
    return WAITING_HOUR


async def ask_gender(message):
    keyboard = [[InlineKeyboardButton(label, callback_data=f"gender_{value}") for label, value in GENDER_BUTTONS]]
    await message.reply_text(
        "🚻 <b>性別</b>を選択してください。",
        reply_markup=InlineKeyboardMarkup(keyboard),
        parse_mode=ParseMode.HTML
    )


async def receive_hour(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение времени рождения"""
    try:
        hour, minute = parse_birth_time(update.message.text)
    except ValueError:
        await update.message.reply_text(
            "❌ 0〜23の数字で入力してください（例: 14 または 14:30）。"
        )
        return WAITING_HOUR

    context.user_data['birth_hour'] = hour
    context.user_data['birth_minute'] = minute
    await ask_gender(update.message)
    return WAITING_GENDER


async def skip_hour(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Время рождения не указано"""
    query = update.callback_query
    await query.answer()
    await query.edit_message_text("⏭️ 生まれた時刻はスキップしました。")
    await ask_gender(query.message)
    return WAITING_GENDER


async def receive_gender(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение пола через кнопку"""
    query = update.callback_query
    await query.answer()

    context.user_data['gender'] = query.data.split("_", 1)[1]

    keyboard = [[InlineKeyboardButton("⏭️ スキップ", callback_data="kanji_skip")]]
    await query.edit_message_text(
        "🔤 <b>漢字の氏名</b>を「姓 名」の形式で入力してください。\n\n"
        "💡 <i>例: 山田 太郎</i>\n"
        "💡 <i>スキップすると姓名判断は省略されます</i>",
        reply_markup=InlineKeyboardMarkup(keyboard),
        parse_mode=ParseMode.HTML
    )
    return WAITING_KANJI


async def receive_kanji(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Получение имени иероглифами для 姓名判断"""
    try:
        surname, given_name = split_kanji_name(update.message.text)
    except ValueError:
        await update.message.reply_text(
            "❌ 姓と名の間にスペースを入れてください（例: 山田 太郎）。"
        )
        return WAITING_KANJI

    context.user_data['last_name_kanji'] = surname
    context.user_data['first_name_kanji'] = given_name
    return await ask_first_question(update.message, context)


async def skip_kanji(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Имя иероглифами не указано"""
    query = update.callback_query
    await query.answer()
    await query.edit_message_text("⏭️ 漢字の氏名はスキップしました。")
    return await ask_first_question(query.message, context)


async def ask_first_question(message, context: ContextTypes.DEFAULT_TYPE):
    context.user_data['answers'] = []
    await message.reply_text(
        format_question(0),
        reply_markup=build_question_keyboard(QUESTIONS[0]),
        parse_mode=ParseMode.HTML
    )
    return WAITING_ANSWER


async def receive_answer(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Ответ на вопрос анкеты"""
    query = update.callback_query
    await query.answer()

    _, question_id, answer = query.data.split("_", 2)
    answers = context.user_data.setdefault('answers', [])
    if not record_answer(answers, int(question_id), answer):
        return WAITING_ANSWER

    if len(answers) < len(QUESTIONS):
        index = len(answers)
        await query.edit_message_text(
            format_question(index),
            reply_markup=build_question_keyboard(QUESTIONS[index]),
            parse_mode=ParseMode.HTML
        )
        return WAITING_ANSWER

    await query.edit_message_text("✅ すべての質問に回答しました。診断中です...")
    await finish_assessment(update, context)
    return ConversationHandler.END


async def finish_assessment(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Расчет, сохранение и отправка результата"""
    message = update.callback_query.message
    await message.chat.send_action(ChatAction.TYPING)

    try:
        data = build_assessment_input(context.user_data)
        result = calculator.calculate(data)
    except (ValidationError, ValueError) as e:
        logger.error(f"Ошибка при расчете: {e}", exc_info=True)
        await message.reply_text(
            "😔 <b>診断中にエラーが発生しました</b>\n\n"
            "もう一度お試しください: /start",
            parse_mode=ParseMode.HTML
        )
        return

    save_assessment(str(update.effective_user.id), data, result)

    chart = report_generator.generate_visual_chart(result)
    await message.reply_photo(
        photo=chart,
        caption=(
            f"🎯 <b>{html.escape(data.full_name)}</b>さんの診断結果\n\n"
            f"🧠 <b>{result.temperament.type.value}</b> {html.escape(result.type_nickname)}\n"
            f"🌿 <b>{result.sanmei.full_type}</b>"
        ),
        parse_mode=ParseMode.HTML
    )

    text_report = report_generator.generate_text_report(data, result)
    for part in split_message(text_report):
        await message.reply_text(f"<pre>{html.escape(part)}</pre>", parse_mode=ParseMode.HTML)

    keyboard = [
        [
            InlineKeyboardButton("🔄 もう一度診断", callback_data="start_assessment"),
            InlineKeyboardButton("📊 診断履歴", callback_data="history")
        ]
    ]
    await message.reply_text(
        "✅ <b>診断が完了しました！</b>",
        reply_markup=InlineKeyboardMarkup(keyboard),
        parse_mode=ParseMode.HTML
    )


def save_assessment(telegram_id: str, data: AssessmentInput, result) -> None:
    """Сохраняет диагностику в базу данных"""
    db = get_db_sync()
    try:
        storage.create_assessment(db, data, result, telegram_id=telegram_id)
    except Exception as e:
        logger.error(f"Ошибка при сохранении: {e}", exc_info=True)
    finally:
        db.close()


def format_history(assessments) -> str:
    """Текст истории диагностик пользователя"""
    if not assessments:
        return (
            "📊 <b>診断履歴</b>\n\n"
            "📭 まだ診断結果がありません。\n\n"
            "/start から診断を始めましょう！"
        )

    text = f"📊 <b>診断履歴</b>（最新 {len(assessments)} 件）\n\n"
    for i, assessment in enumerate(assessments, 1):
        created = assessment.created_at.strftime("%Y.%m.%d %H:%M") if assessment.created_at else "—"
        text += (
            f"<b>{i}.</b> 📅 {created}\n"
            f"   🧠 {assessment.mbti_type} {html.escape(assessment.type_nickname)} / 🌿 {assessment.sanmei_type}\n"
        )
    return text


async def show_history(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Показывает историю диагностик"""
    user_id = str(update.effective_user.id)
    db = get_db_sync()
    try:
        text = format_history(storage.list_by_telegram_id(db, user_id, limit=settings.history_limit))
    finally:
        db.close()

    if update.callback_query:
        await update.callback_query.answer()
        await update.callback_query.edit_message_text(text, parse_mode=ParseMode.HTML)
    else:
        await update.message.reply_text(text, parse_mode=ParseMode.HTML)


async def cancel(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Отмена операции"""
    context.user_data.clear()
    keyboard = [[InlineKeyboardButton("✨ 診断を始める", callback_data="start_assessment")]]

    await update.message.reply_text(
        "❌ 診断を中止しました。",
        reply_markup=InlineKeyboardMarkup(keyboard)
    )
    return ConversationHandler.END


def main():
    """Главная функция запуска бота"""
    if not settings.telegram_bot_token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not set")

    # Инициализация базы данных
    init_db()

    # Создание приложения
    application = Application.builder().token(settings.telegram_bot_token).build()

    # Обработчик разговора для диагностики
    conv_handler = ConversationHandler(
        entry_points=[
            CallbackQueryHandler(begin_assessment, pattern="^start_assessment$"),
            CommandHandler("diagnose", begin_assessment)
        ],
        states={
            WAITING_NAME: [MessageHandler(filters.TEXT & ~filters.COMMAND, receive_name)],
            WAITING_DATE: [MessageHandler(filters.TEXT & ~filters.COMMAND, receive_date)],
            WAITING_HOUR: [
                MessageHandler(filters.TEXT & ~filters.COMMAND, receive_hour),
                CallbackQueryHandler(skip_hour, pattern="^hour_skip$")
            ],
            WAITING_GENDER: [CallbackQueryHandler(receive_gender, pattern="^gender_")],
            WAITING_KANJI: [
                MessageHandler(filters.TEXT & ~filters.COMMAND, receive_kanji),
                CallbackQueryHandler(skip_kanji, pattern="^kanji_skip$")
            ],
            WAITING_ANSWER: [CallbackQueryHandler(receive_answer, pattern="^answer_")],
        },
        fallbacks=[CommandHandler("cancel", cancel)],
    )

    # Регистрация обработчиков
    application.add_handler(CommandHandler("start", start))
    application.add_handler(conv_handler)
    application.add_handler(CommandHandler("history", show_history))
    application.add_handler(CallbackQueryHandler(show_history, pattern="^history$"))

    # Запуск бота
    logger.info("Бот запущен...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == '__main__':
    main()
