"""Static content of the portfolio page."""

from portfolio_site.models.portfolio import (
    ContactInfo,
    Education,
    Experience,
    NavLink,
    PortfolioContent,
    PortfolioItem,
    Profile,
    Project,
)

profile = Profile(
    name="Arham Nugraha",
    nickname="Aan",
    job="SPV di PT Valor Inspiration Pesona",
    location="Makassar, Sulawesi Selatan",
    address="Btn Andi Tonro Permai Blok B15 No 20 Sungguminasa, Kabupaten Gowa",
    hobbies=["Bermusik", "Bernyanyi", "Futsal"],
    photo="https://aanarham-portfolio.netlify.app/images/profil.jpg",
)

portfolio_content = PortfolioContent(
    profile=profile,
    about=(
        "Saya memiliki pengalaman di bidang distribusi, sales marketing, "
        "dan manajemen tim di berbagai perusahaan."
    ),
    skills=[
        "Supervisi & Manajemen",
        "Sales & Marketing",
        "Analisis data",
        "Manajemen Tim",
    ],
    services=[
        "Supervisi Distribusi",
        "Sales & Marketing",
        "Manajemen Tim",
        "Konsultasi Produk",
    ],
    education=[
        Education(
            level="Sekolah Menengah Atas (SMA)",
            description="Pendidikan menengah atas",
        ),
    ],
    experiences=[
        Experience(
            title="SPV",
            company="PT Valor Inspiration Pesona",
            description=(
                "Mengelola dan mengawasi distribusi alat salon dan kosmetika. "
                "Bertanggung jawab atas operasional distribusi, manajemen tim, "
                "dan pencapaian target perusahaan."
            ),
        ),
        Experience(
            title="Sales Marketing",
            company="Berbagai Perusahaan",
            description=(
                "Pengalaman dalam bidang sales marketing untuk berbagai produk: "
                "Crocodile Garment PT Sinta Pertiwi Mks, Kosmetik, produk bayi & "
                "klontongan UD Balijaya, Produk Kosmetik, Bahan bangunan."
            ),
        ),
        Experience(
            title="Sales Promotion Boy",
            company="Matahari Department Store",
            description=(
                "Bertugas sebagai sales promotion untuk meningkatkan penjualan "
                "produk di department store."
            ),
        ),
    ],
    portfolio_items=[
        PortfolioItem(
            title="Distribusi Produk Salon & Kosmetika",
            description="Mengelola distribusi produk di PT VALOR INSPIRATION PESONA",
        ),
        PortfolioItem(
            title="Sales & Marketing Campaign",
            description="Berbagai kampanye pemasaran untuk produk konsumen",
        ),
    ],
    projects=[
        Project(
            title="Manajemen Katalog Produk",
            description="Aplikasi web untuk mengelola katalog produk secara efisien.",
            technologies=["Web App"],
            link="https://vip-six-blue.vercel.app/",
        ),
        Project(
            title="Katalog Toko Zeta",
            description="Aplikasi katalog produk toko berbasis web, dibuat dengan Next.js dan Vercel.",
            technologies=["Next.js", "Vercel"],
            link="https://katalog-toko-zeta.vercel.app/",
        ),
        Project(
            title="VIP AI Cek",
            description="Aplikasi berbasis AI untuk pengecekan otomatis, dibangun dengan Streamlit.",
            technologies=["AI", "Streamlit"],
            link="https://vip-ai-cek.streamlit.app/",
        ),
    ],
    contact=ContactInfo(
        office_email="spv.valorinspirationpesona@gmail.com",
        personal_email="aan_croco@yahoo.com",
        whatsapp="082393654513",
        tiktok="https://www.tiktok.com/@aanarham333",
        github="https://github.com/aanarham",
        address=profile.address,
    ),
    navigation=[
        NavLink(anchor="about", label="Tentang"),
        NavLink(anchor="skills", label="Keahlian"),
        NavLink(anchor="services", label="Layanan"),
        NavLink(anchor="education", label="Pendidikan"),
        NavLink(anchor="experience", label="Pengalaman"),
        NavLink(anchor="portfolio", label="Portofolio"),
        NavLink(anchor="projects", label="Proyek"),
        NavLink(anchor="contact", label="Kontak"),
    ],
)
