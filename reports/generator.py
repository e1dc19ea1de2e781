"""Генератор текстовых и визуальных отчетов диагностики"""
from typing import List, Optional, Tuple
from PIL import Image, ImageDraw, ImageFont
import io
import math
import os
import logging

from config import settings
from personality_calculator.models import AnalysisResult, AssessmentInput, TraitScore
from personality_calculator.profile import calculate_trait_scores

logger = logging.getLogger(__name__)

SEPARATOR = "━" * 40

GENDER_LABELS = {'male': '男性', 'female': '女性', 'other': 'その他'}

# Шрифты с японскими иероглифами
CJK_FONT_PATHS = [
    "/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc",  # Debian/Ubuntu
    "/usr/share/fonts/noto-cjk/NotoSansCJK-Regular.ttc",  # Arch/Fedora
    "/usr/share/fonts/google-noto-cjk/NotoSansCJK-Regular.ttc",
    "/System/Library/Fonts/Hiragino Sans GB.ttc",  # macOS
    "C:/Windows/Fonts/msgothic.ttc",  # Windows
]

# Подписи осей, если японский шрифт не найден
ASCII_TRAIT_LABELS = {
    '内向性': 'Introversion',
    '直感力': 'Intuition',
    '論理性': 'Thinking',
    '計画性': 'Judging',
    '調和性': 'Harmony',
    '創造性': 'Creativity',
}


def find_cjk_font(size: int) -> Optional[ImageFont.FreeTypeFont]:
    """Ищет шрифт с японскими символами; None, если не найден"""
    candidates = [settings.chart_font_path] if settings.chart_font_path else []
    for path in candidates + CJK_FONT_PATHS:
        if not os.path.exists(path):
            continue
        try:
            return ImageFont.truetype(path, size)
        except OSError as e:
            logger.warning(f"Не удалось загрузить шрифт {path}: {e}")
    return None


class ReportGenerator:
    """Генератор текстовых и визуальных отчетов"""

    def generate_text_report(self, data: AssessmentInput, result: AnalysisResult) -> str:
        """Генерирует текстовый отчет"""
        temperament = result.temperament
        sanmei = result.sanmei

        report = f"""
╔════════════════════════════════════════╗
║     性格診断レポート                    ║
╚════════════════════════════════════════╝

👤 お名前: {data.full_name}
📅 生年月日: {self._format_birth(data)}
🚻 性別: {GENDER_LABELS.get(data.gender, data.gender)}

{SEPARATOR}

🧠 MBTIタイプ: {temperament.type.value} {result.type_nickname}

• 内向(I) {temperament.ie_scale}% / 外向(E) {100 - temperament.ie_scale}%
• 直感(N) {temperament.ns_scale}% / 感覚(S) {100 - temperament.ns_scale}%
• 思考(T) {temperament.ft_scale}% / 感情(F) {100 - temperament.ft_scale}%
• 判断(J) {temperament.jp_scale}% / 知覚(P) {100 - temperament.jp_scale}%

{self._format_list(result.mbti_traits)}

{SEPARATOR}

🌿 算命学タイプ: {sanmei.full_type}

{self._format_list(result.sanmei_traits)}

{SEPARATOR}

📖 総合分析:

{result.overview}

{SEPARATOR}

💪 強み:
{result.strengths}

⚠️ 課題:
{result.challenges}

💞 人間関係:
{result.relationships}

💼 キャリア:
{result.career}

{SEPARATOR}

⚖️ バランスのヒント:
• エネルギー管理: {result.balance.energy_management}
• 完璧主義: {result.balance.perfectionism}

🤝 人間関係のヒント:
• 境界線: {result.relationship_tips.boundaries}
• 表現: {result.relationship_tips.expression}
• 相性: {result.relationship_tips.compatibility}

🔭 未来への展望:
{result.future_outlook}
"""

        if result.name_divination:
            report += f"\n{SEPARATOR}\n"
            report += self._format_name_divination(result)

        if result.four_pillars:
            report += f"\n{SEPARATOR}\n"
            report += self._format_four_pillars(result)

        report += f"\n{SEPARATOR}\n"
        report += "📊 性格特性プロファイル:\n\n"
        report += self._format_trait_scores(calculate_trait_scores(temperament, sanmei))

        report += f"\n{SEPARATOR}\n"
        report += "✨ レポートは自動生成されました\n"

        return report

    def _format_birth(self, data: AssessmentInput) -> str:
        text = f"{data.birth_year}年{data.birth_month}月{data.birth_day}日"
        if data.birth_hour is not None:
            text += f" {data.birth_hour}時"
            if data.birth_minute is not None:
                text += f"{data.birth_minute}分"
        return text

    def _format_list(self, items: List[str]) -> str:
        return "\n".join(f"• {item}" for item in items)

    def _format_name_divination(self, result: AnalysisResult) -> str:
        seimei = result.name_divination
        return (
            "🔤 姓名判断:\n\n"
            f"• 総画数: {seimei.name_total}\n"
            f"• 天格: {seimei.heaven_number} / 地格: {seimei.earth_number} / 人格: {seimei.human_number}\n\n"
            f"{self._format_list(seimei.characteristics)}\n\n"
            f"{seimei.good_luck}\n\n"
            f"アドバイス: {seimei.advice}\n"
        )

    def _format_four_pillars(self, result: AnalysisResult) -> str:
        pillars = result.four_pillars
        lucky = "・".join(element.value for element in pillars.lucky_elements)
        unlucky = "・".join(element.value for element in pillars.unlucky_elements)
        return (
            "🏮 四柱推命:\n\n"
            f"• 日柱: {pillars.heavenly_stem.value}{pillars.earthly_branch.value}\n"
            f"• 日主の五行: {pillars.day_master.value}\n"
            f"• 吉の五行: {lucky}\n"
            f"• 注意の五行: {unlucky}\n\n"
            f"人生のテーマ: {pillars.life_theme}\n"
        )

    def _format_trait_scores(self, scores: List[TraitScore]) -> str:
        lines = []
        for score in scores:
            filled = round(score.value / 10)
            bar = "█" * filled + "░" * (10 - filled)
            lines.append(f"{score.trait} {bar} {score.value}")
        return "\n".join(lines) + "\n"

    def generate_visual_chart(self, result: AnalysisResult) -> bytes:
        """Генерирует радиальную диаграмму шести черт личности (PNG)"""
        scores = calculate_trait_scores(result.temperament, result.sanmei)

        img_size = 600
        center = img_size // 2
        radius = 200

        grid_color = (200, 200, 200)
        axis_color = (150, 150, 150)
        fill_color = (180, 222, 236)
        outline_color = (68, 166, 198)

        img = Image.new('RGB', (img_size, img_size), color='white')
        draw = ImageDraw.Draw(img)

        label_font = find_cjk_font(20)
        use_cjk = label_font is not None
        if label_font is None:
            label_font = ImageFont.load_default()

        count = len(scores)

        # Сетка: 20, 40, 60, 80, 100
        for level in range(1, 6):
            ring = self._polygon(center, radius * level / 5, [100] * count)
            draw.polygon(ring, outline=grid_color)

        for x, y in self._polygon(center, radius, [100] * count):
            draw.line([(center, center), (x, y)], fill=axis_color, width=1)

        # Значения
        data_points = self._polygon(center, radius, [score.value for score in scores])
        draw.polygon(data_points, fill=fill_color, outline=outline_color)
        for x, y in data_points:
            draw.ellipse([x - 4, y - 4, x + 4, y + 4], fill=outline_color)

        # Подписи осей
        for score, (x, y) in zip(scores, self._polygon(center, radius + 40, [100] * count)):
            label = score.trait if use_cjk else ASCII_TRAIT_LABELS.get(score.trait, score.trait)
            text = f"{label} {score.value}"
            bbox = draw.textbbox((0, 0), text, font=label_font)
            text_width = bbox[2] - bbox[0]
            text_height = bbox[3] - bbox[1]
            draw.text((x - text_width // 2, y - text_height // 2), text, fill=(0, 0, 0), font=label_font)

        # Подпись под диаграммой
        label_height = 40
        new_img = Image.new('RGB', (img_size, img_size + label_height), color='white')
        new_img.paste(img, (0, 0))

        draw = ImageDraw.Draw(new_img)
        title = f"{result.temperament.type.value} × {result.sanmei.full_type}"
        if not use_cjk:
            title = f"{result.temperament.type.value} / {result.sanmei.element.name} {result.sanmei.polarity.name}"
        bbox = draw.textbbox((0, 0), title, font=label_font)
        text_width = bbox[2] - bbox[0]
        draw.text(((img_size - text_width) // 2, img_size + 10), title, fill=(0, 0, 0), font=label_font)

        img_bytes = io.BytesIO()
        new_img.save(img_bytes, format='PNG')
        img_bytes.seek(0)

        return img_bytes.getvalue()

    @staticmethod
    def _polygon(center: int, radius: float, values: List[int]) -> List[Tuple[float, float]]:
        """Точки многоугольника; первая ось направлена вверх"""
        count = len(values)
        points = []
        for i, value in enumerate(values):
            angle = -math.pi / 2 + 2 * math.pi * i / count
            distance = radius * value / 100
            points.append((center + distance * math.cos(angle), center + distance * math.sin(angle)))
        return points
