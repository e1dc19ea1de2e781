"""Генератор PDF отчетов"""
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.cidfonts import UnicodeCIDFont
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from io import BytesIO
from xml.sax.saxutils import escape

from personality_calculator.models import AnalysisResult, AssessmentInput
from personality_calculator.profile import calculate_trait_scores

# Встроенный японский CID-шрифт reportlab
JAPANESE_FONT = 'HeiseiKakuGo-W5'


class PDFGenerator:
    """Генератор PDF отчетов"""

    def __init__(self):
        pdfmetrics.registerFont(UnicodeCIDFont(JAPANESE_FONT))
        self.styles = getSampleStyleSheet()
        self._setup_styles()

    def _setup_styles(self):
        """Настройка стилей"""
        # Заголовок
        self.styles.add(ParagraphStyle(
            name='CustomTitle',
            parent=self.styles['Heading1'],
            fontName=JAPANESE_FONT,
            fontSize=22,
            textColor=colors.HexColor('#2C3E50'),
            spaceAfter=20,
            alignment=TA_CENTER
        ))

        # Подзаголовок
        self.styles.add(ParagraphStyle(
            name='CustomHeading',
            parent=self.styles['Heading2'],
            fontName=JAPANESE_FONT,
            fontSize=15,
            textColor=colors.HexColor('#34495E'),
            spaceAfter=10,
            spaceBefore=10
        ))

        # Обычный текст
        self.styles.add(ParagraphStyle(
            name='CustomBody',
            parent=self.styles['Normal'],
            fontName=JAPANESE_FONT,
            fontSize=10.5,
            leading=16,
            wordWrap='CJK',
            textColor=colors.HexColor('#2C3E50'),
            alignment=TA_JUSTIFY,
            spaceAfter=6
        ))

    def _heading(self, text: str) -> Paragraph:
        return Paragraph(escape(text), self.styles['CustomHeading'])

    def _body(self, text: str) -> Paragraph:
        return Paragraph(escape(text).replace('\n', '<br/>'), self.styles['CustomBody'])

    def _table(self, rows, col_widths) -> Table:
        table = Table(rows, colWidths=col_widths)
        table.setStyle(TableStyle([
            ('FONTNAME', (0, 0), (-1, -1), JAPANESE_FONT),
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#3498DB')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
            ('FONTSIZE', (0, 0), (-1, 0), 11),
            ('BOTTOMPADDING', (0, 0), (-1, 0), 8),
            ('GRID', (0, 0), (-1, -1), 1, colors.black),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#ECF0F1')])
        ]))
        return table

    def generate_pdf(self, data: AssessmentInput, result: AnalysisResult) -> bytes:
        """Генерирует PDF отчет"""
        buffer = BytesIO()
        doc = SimpleDocTemplate(buffer, pagesize=A4)
        story = []

        temperament = result.temperament
        sanmei = result.sanmei

        story.append(Paragraph("性格診断レポート", self.styles['CustomTitle']))
        story.append(Spacer(1, 6*mm))

        # Информация о клиенте
        client_info = f"お名前: {data.full_name}\n生年月日: {data.birth_year}年{data.birth_month}月{data.birth_day}日"
        if data.birth_hour is not None:
            client_info += f" {data.birth_hour}時"
        story.append(self._body(client_info))
        story.append(Spacer(1, 6*mm))

        # Основные результаты
        story.append(self._heading("診断結果"))
        summary_rows = [
            ['項目', '結果'],
            ['MBTIタイプ', f"{temperament.type.value} {result.type_nickname}"],
            ['算命学タイプ', sanmei.full_type],
            ['内向(I) / 外向(E)', f"{temperament.ie_scale}% / {100 - temperament.ie_scale}%"],
            ['直感(N) / 感覚(S)', f"{temperament.ns_scale}% / {100 - temperament.ns_scale}%"],
            ['思考(T) / 感情(F)', f"{temperament.ft_scale}% / {100 - temperament.ft_scale}%"],
            ['判断(J) / 知覚(P)', f"{temperament.jp_scale}% / {100 - temperament.jp_scale}%"],
        ]
        story.append(self._table(summary_rows, [70*mm, 110*mm]))
        story.append(Spacer(1, 6*mm))

        # Профиль
        story.append(self._heading("性格特性プロファイル"))
        trait_rows = [['特性', 'スコア']]
        trait_rows += [[score.trait, str(score.value)] for score in calculate_trait_scores(temperament, sanmei)]
        story.append(self._table(trait_rows, [70*mm, 110*mm]))
        story.append(Spacer(1, 6*mm))

        sections = [
            ("総合分析", result.overview),
            ("MBTIの特徴", "\n".join(f"・{trait}" for trait in result.mbti_traits)),
            ("算命学の特徴", "\n".join(f"・{trait}" for trait in result.sanmei_traits)),
            ("強み", result.strengths),
            ("課題", result.challenges),
            ("人間関係", result.relationships),
            ("キャリア", result.career),
            ("バランスのヒント", f"{result.balance.energy_management}\n{result.balance.perfectionism}"),
            ("人間関係のヒント", "\n".join([
                result.relationship_tips.boundaries,
                result.relationship_tips.expression,
                result.relationship_tips.compatibility,
            ])),
            ("未来への展望", result.future_outlook),
        ]

        if result.name_divination:
            seimei = result.name_divination
            sections.append(("姓名判断", "\n".join([
                f"総画数: {seimei.name_total}（天格 {seimei.heaven_number} / 地格 {seimei.earth_number} / 人格 {seimei.human_number}）",
                *seimei.characteristics,
                seimei.good_luck,
                seimei.advice,
            ])))

        if result.four_pillars:
            pillars = result.four_pillars
            sections.append(("四柱推命", "\n".join([
                f"日柱: {pillars.heavenly_stem.value}{pillars.earthly_branch.value}（日主: {pillars.day_master.value}）",
                f"吉の五行: {'・'.join(e.value for e in pillars.lucky_elements)}",
                f"注意の五行: {'・'.join(e.value for e in pillars.unlucky_elements)}",
                pillars.life_theme,
            ])))

        for title, text in sections:
            story.append(self._heading(title))
            story.append(self._body(text))
            story.append(Spacer(1, 4*mm))

        # Футер
        story.append(Spacer(1, 10*mm))
        story.append(self._body("このレポートは自動生成されました"))

        doc.build(story)
        buffer.seek(0)
        return buffer.getvalue()


def generate_pdf_report(data: AssessmentInput, result: AnalysisResult) -> bytes:
    """Удобная функция для генерации PDF"""
    generator = PDFGenerator()
    return generator.generate_pdf(data, result)
